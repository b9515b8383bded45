import copy

import pytest
from aws_request_signing import URI, AWSRequest, ContentType, Field, Fields


def test_fields_lookup_is_case_insensitive() -> None:
    fields = Fields([Field(name="X-Amz-Date", values=["20150830T123600Z"])])
    assert "x-amz-date" in fields
    assert fields["X-AMZ-DATE"].name == "X-Amz-Date"
    assert fields.get("missing") is None


def test_fields_merge_values_in_order() -> None:
    fields = Fields.from_pairs(
        [("My-Header", "a"), ("Host", "example.com"), ("my-header", "b")]
    )
    assert len(fields) == 2
    assert fields["my-header"].values == ["a", "b"]
    assert fields["my-header"].as_string() == "a,b"


def test_fields_initial_list_merges_case_variants() -> None:
    fields = Fields(
        [
            Field(name="Accept", values=["text/plain"]),
            Field(name="accept", values=["application/json"]),
            Field(name="Empty"),
        ]
    )
    assert fields["ACCEPT"].values == ["text/plain", "application/json"]
    assert fields["empty"].values == []


def test_fields_delete() -> None:
    fields = Fields.from_pairs([("Host", "example.com")])
    del fields["HOST"]
    assert "host" not in fields


def test_uri_from_url() -> None:
    uri = URI.from_url("https://sqs.eu-central-1.amazonaws.com:8443/a/b?x=1&y=2")
    assert uri == URI(
        scheme="https",
        host="sqs.eu-central-1.amazonaws.com",
        port=8443,
        path="/a/b",
        query="x=1&y=2",
    )


def test_uri_from_url_requires_host() -> None:
    with pytest.raises(ValueError):
        URI.from_url("/just/a/path")


@pytest.mark.parametrize(
    "path,segments",
    [
        (None, []),
        ("", []),
        ("/", []),
        ("/a b/c", ["a b", "c"]),
        ("/a%20b//c/", ["a b", "c"]),
    ],
)
def test_uri_path_segments(path: str | None, segments: list[str]) -> None:
    assert URI(host="example.com", path=path).path_segments == segments


def test_uri_query_params_keep_value_order() -> None:
    uri = URI(host="example.com", query="b=2&a=10&a=1&flag=")
    assert uri.query_params == {"b": ["2"], "a": ["10", "1"], "flag": [""]}


@pytest.mark.parametrize(
    "value,expected",
    [
        ("application/json", ContentType(media_type="application/json")),
        (
            "application/json; charset=UTF-8",
            ContentType(media_type="application/json", charset="UTF-8"),
        ),
        (
            'text/plain;Charset="utf-8"',
            ContentType(media_type="text/plain", charset="utf-8"),
        ),
        (
            "multipart/form-data; boundary=xyz; charset=utf-8",
            ContentType(media_type="multipart/form-data; boundary=xyz", charset="utf-8"),
        ),
    ],
)
def test_content_type_parse(value: str, expected: ContentType) -> None:
    assert ContentType.parse(value) == expected


def test_content_type_render() -> None:
    assert ContentType(media_type="text/plain").render() == "text/plain"
    assert (
        ContentType(media_type="text/plain", charset="UTF-8").render()
        == "text/plain; charset=UTF-8"
    )


def test_request_defaults_to_octet_stream() -> None:
    request = AWSRequest(
        destination=URI(host="example.com"), method="GET", body=b"", fields=Fields()
    )
    assert request.content_type == ContentType(media_type="application/octet-stream")


def test_request_deepcopy_copies_fields_only() -> None:
    request = AWSRequest(
        destination=URI(host="example.com"),
        method="PUT",
        body=b"payload",
        fields=Fields.from_pairs([("Host", "example.com")]),
    )
    copied = copy.deepcopy(request)
    copied.fields.add("X-Extra", "1")
    assert "x-extra" not in request.fields
    assert copied.destination is request.destination
    assert copied.body is request.body


@pytest.mark.parametrize(
    "url",
    [
        "https://sqs.us-east-1.amazonaws.com/123/q?a=1",
        "http://localhost:9324/queue/test#frag",
        "https://example.amazonaws.com",
    ],
)
def test_uri_build_round_trips(url: str) -> None:
    assert URI.from_url(url).build() == url


def test_uri_build_includes_port() -> None:
    uri = URI(host="example.com", port=8443, path="/a b", query="x=1")
    assert uri.netloc == "example.com:8443"
    assert uri.build() == "https://example.com:8443/a b?x=1"
