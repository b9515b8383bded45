# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Self

from .exceptions import InvalidSigningConfigException

SIGV4_ALGORITHM: str = "AWS4-HMAC-SHA256"
DEFAULT_CANONICAL_HEADER_NAMES: tuple[str, ...] = ("host", "x-amz-date")

ENV_REGION: tuple[str, ...] = ("AWS_REGION", "AWS_DEFAULT_REGION")
ENV_ACCESS_KEY_ID: str = "AWS_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY: str = "AWS_SECRET_ACCESS_KEY"


class PayloadHashMode(Enum):
    """How the payload hash component of the canonical request is produced."""

    INCLUDED = "included"
    """Hash the request body with SHA-256."""

    EXCLUDED = "excluded"
    """Hash the request body with SHA-256.

    Reserved for callers that leave the ``x-amz-content-sha256`` header off the
    request; signing behaves exactly as for ``INCLUDED``.
    """

    UNSIGNED = "unsigned"
    """Use the literal ``UNSIGNED-PAYLOAD`` instead of a body hash."""


def normalize_header_names(names: Iterable[str]) -> tuple[str, ...]:
    """Strip, lower-case, drop empty entries, dedupe and sort header names."""
    return tuple(sorted({name.strip().lower() for name in names} - {""}))


@dataclass(kw_only=True, frozen=True)
class SigningConfig:
    """Immutable settings shared by every signing call of a signer.

    Instances hold no per-request state and may be reused across threads.
    """

    region: str
    service: str
    access_key: str
    secret_key: str = field(repr=False)
    algorithm: str = SIGV4_ALGORITHM
    double_encode_path: bool = True
    """Double-encode path segments. Must be ``False`` for S3."""

    canonical_header_names: tuple[str, ...] = DEFAULT_CANONICAL_HEADER_NAMES
    """Names included in the canonical request and ``SignedHeaders``."""

    payload_hash_mode: PayloadHashMode = PayloadHashMode.INCLUDED

    def __post_init__(self) -> None:
        for name in ("region", "service", "access_key", "secret_key", "algorithm"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidSigningConfigException(
                    f"SigningConfig.{name} must be a non-empty string, got {type(value)}."
                )
        if not isinstance(self.payload_hash_mode, PayloadHashMode):
            raise InvalidSigningConfigException(
                "SigningConfig.payload_hash_mode must be a PayloadHashMode, got "
                f"{self.payload_hash_mode!r}."
            )
        if isinstance(self.canonical_header_names, str):
            raise InvalidSigningConfigException(
                "SigningConfig.canonical_header_names must be a collection of names, "
                "not a single string."
            )
        # Frozen dataclass, so normalized values have to bypass __setattr__.
        object.__setattr__(
            self,
            "canonical_header_names",
            normalize_header_names(self.canonical_header_names),
        )

    @property
    def signed_headers(self) -> str:
        return ";".join(self.canonical_header_names)

    @classmethod
    def from_environment(
        cls,
        *,
        service: str,
        region: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        environ: Mapping[str, str] | None = None,
        **kwargs,
    ) -> Self:
        """Build a config, filling unset credentials and region from the environment.

        Explicit arguments take precedence over ``AWS_REGION`` (then
        ``AWS_DEFAULT_REGION``), ``AWS_ACCESS_KEY_ID`` and ``AWS_SECRET_ACCESS_KEY``.
        Remaining keyword arguments are passed to the constructor unchanged.
        """
        env = os.environ if environ is None else environ
        if region is None:
            region = next((env[var] for var in ENV_REGION if env.get(var)), None)
        return cls(
            region=region,  # pyright: ignore [reportArgumentType]
            service=service,
            access_key=(
                access_key if access_key is not None else env.get(ENV_ACCESS_KEY_ID)
            ),  # pyright: ignore
            secret_key=(
                secret_key
                if secret_key is not None
                else env.get(ENV_SECRET_ACCESS_KEY)
            ),  # pyright: ignore
            **kwargs,
        )
