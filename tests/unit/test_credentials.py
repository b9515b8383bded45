from aws_request_signing.credentials import HttpCredentials, render_credentials


def test_render_credentials() -> None:
    credentials = render_credentials(
        algorithm="aws4-hmac-sha256",
        access_key="AKID",
        credential_scope="20150830/us-east-1/service/aws4_request",
        signed_headers="content-type;host;x-amz-date",
        signature="abc123",
    )
    assert credentials.scheme == "AWS4-HMAC-SHA256"
    assert credentials.render() == (
        "AWS4-HMAC-SHA256 "
        "Credential=AKID/20150830/us-east-1/service/aws4_request, "
        "SignedHeaders=content-type;host;x-amz-date, "
        "Signature=abc123"
    )


def test_values_are_not_quoted() -> None:
    credentials = HttpCredentials(scheme="Test", params=(("a", "b c"), ("d", "e,f")))
    assert str(credentials) == "Test a=b c, d=e,f"
