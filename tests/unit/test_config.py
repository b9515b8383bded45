import dataclasses

import pytest
from aws_request_signing import PayloadHashMode, SigningConfig
from aws_request_signing.exceptions import InvalidSigningConfigException


def make_config(**kwargs: object) -> SigningConfig:
    values: dict[str, object] = {
        "region": "us-east-1",
        "service": "sqs",
        "access_key": "AKIDEXAMPLE",
        "secret_key": "SECRET",
    }
    values.update(kwargs)
    return SigningConfig(**values)  # type: ignore[arg-type]


def test_defaults() -> None:
    config = make_config()
    assert config.algorithm == "AWS4-HMAC-SHA256"
    assert config.double_encode_path is True
    assert config.payload_hash_mode is PayloadHashMode.INCLUDED
    assert config.canonical_header_names == ("host", "x-amz-date")
    assert config.signed_headers == "host;x-amz-date"


def test_canonical_header_names_are_deduplicated() -> None:
    config = make_config(canonical_header_names=["Host", "host", " HOST "])
    assert config.canonical_header_names == ("host",)


def test_canonical_header_names_are_sorted_and_trimmed() -> None:
    config = make_config(
        canonical_header_names=["X-Amz-Date", "", "  ", "Content-Type", "host"]
    )
    assert config.canonical_header_names == ("content-type", "host", "x-amz-date")
    assert config.signed_headers == "content-type;host;x-amz-date"


def test_single_string_header_names_rejected() -> None:
    with pytest.raises(InvalidSigningConfigException):
        make_config(canonical_header_names="host")


@pytest.mark.parametrize("name", ["region", "service", "access_key", "secret_key"])
def test_empty_values_rejected(name: str) -> None:
    with pytest.raises(InvalidSigningConfigException):
        make_config(**{name: ""})


def test_invalid_payload_hash_mode_rejected() -> None:
    with pytest.raises(ValueError):
        make_config(payload_hash_mode="UNSIGNED")


def test_config_is_immutable() -> None:
    config = make_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.region = "eu-west-1"  # type: ignore[misc]


def test_secret_key_not_in_repr() -> None:
    assert "SECRET" not in repr(make_config())


def test_from_environment() -> None:
    config = SigningConfig.from_environment(
        service="sqs",
        environ={
            "AWS_DEFAULT_REGION": "eu-west-1",
            "AWS_ACCESS_KEY_ID": "AKIDENV",
            "AWS_SECRET_ACCESS_KEY": "SECRETENV",
        },
        double_encode_path=False,
    )
    assert config.region == "eu-west-1"
    assert config.access_key == "AKIDENV"
    assert config.secret_key == "SECRETENV"
    assert config.double_encode_path is False


def test_from_environment_prefers_explicit_values() -> None:
    config = SigningConfig.from_environment(
        service="s3",
        region="us-west-2",
        access_key="AKIDARG",
        environ={
            "AWS_REGION": "eu-central-1",
            "AWS_DEFAULT_REGION": "eu-west-1",
            "AWS_ACCESS_KEY_ID": "AKIDENV",
            "AWS_SECRET_ACCESS_KEY": "SECRETENV",
        },
    )
    assert config.region == "us-west-2"
    assert config.access_key == "AKIDARG"
    assert config.secret_key == "SECRETENV"


def test_from_environment_region_precedence() -> None:
    config = SigningConfig.from_environment(
        service="sqs",
        environ={
            "AWS_REGION": "eu-central-1",
            "AWS_DEFAULT_REGION": "eu-west-1",
            "AWS_ACCESS_KEY_ID": "AKIDENV",
            "AWS_SECRET_ACCESS_KEY": "SECRETENV",
        },
    )
    assert config.region == "eu-central-1"


def test_from_environment_missing_credentials() -> None:
    with pytest.raises(InvalidSigningConfigException):
        SigningConfig.from_environment(
            service="sqs", environ={"AWS_REGION": "eu-central-1"}
        )


def test_from_environment_keeps_explicit_empty_credentials() -> None:
    with pytest.raises(InvalidSigningConfigException) as exc_info:
        SigningConfig.from_environment(
            service="sqs",
            region="eu-central-1",
            access_key="",
            environ={
                "AWS_ACCESS_KEY_ID": "AKIDENV",
                "AWS_SECRET_ACCESS_KEY": "SECRETENV",
            },
        )
    assert "access_key" in str(exc_info.value)
