# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
import re
from copy import deepcopy
from dataclasses import dataclass
from datetime import UTC, datetime

from ._crypto import hmac_sha256, sha256_hex
from ._hex import to_hex
from ._http import AWSRequest, Field
from .canonical import DATE_HEADER, SIGV4_TIMESTAMP_FORMAT, Canonicalizer
from .config import PayloadHashMode, SigningConfig
from .credentials import AUTHORIZATION_HEADER, HttpCredentials, render_credentials
from .exceptions import (
    MalformedTimestampException,
    MissingPayloadException,
    MissingTimestampException,
)

logger = logging.getLogger(__name__)

DATE_STAMP_FORMAT: str = "%Y%m%d"
SIGNING_REQUEST_TYPE: str = "aws4_request"
UNSIGNED_PAYLOAD: str = "UNSIGNED-PAYLOAD"
EMPTY_SHA256_HASH: str = (
    "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
)

_TIMESTAMP_RE = re.compile(r"\d{8}T\d{6}Z")


def derive_signing_key(
    *, secret_key: str, date_stamp: str, region: str, service: str
) -> bytes:
    """Derive the signing key scoped to a day, region and service.

    DateKey              = HMAC-SHA256("AWS4"+"<SecretAccessKey>", "<YYYYMMDD>")
    DateRegionKey        = HMAC-SHA256(<DateKey>, "<aws-region>")
    DateRegionServiceKey = HMAC-SHA256(<DateRegionKey>, "<aws-service>")
    SigningKey           = HMAC-SHA256(<DateRegionServiceKey>, "aws4_request")
    """
    k_secret = f"AWS4{secret_key}".encode()
    k_date = hmac_sha256(k_secret, date_stamp)
    k_region = hmac_sha256(k_date, region)
    k_service = hmac_sha256(k_region, service)
    return hmac_sha256(k_service, SIGNING_REQUEST_TYPE)


def parse_timestamp(request: AWSRequest) -> datetime:
    """Read the signing time from the request's ``x-amz-date`` field."""
    field = request.fields.get(DATE_HEADER)
    if field is None or not field.values:
        raise MissingTimestampException(
            f"Cannot sign a request without a {DATE_HEADER} header."
        )
    value = field.values[0].strip()
    if not _TIMESTAMP_RE.fullmatch(value):
        raise MalformedTimestampException(
            f"{DATE_HEADER} must be formatted as yyyyMMdd'T'HHmmss'Z', got {value!r}."
        )
    try:
        return datetime.strptime(value, SIGV4_TIMESTAMP_FORMAT).replace(tzinfo=UTC)
    except ValueError as e:
        raise MalformedTimestampException(
            f"{DATE_HEADER} is not a valid UTC timestamp: {value!r}."
        ) from e


@dataclass(frozen=True)
class SignatureResult:
    signature: str
    """Lowercase hex HMAC-SHA256 of the string to sign."""

    timestamp: datetime
    """The signing time the signature is bound to."""

    @property
    def date_stamp(self) -> str:
        return self.timestamp.strftime(DATE_STAMP_FORMAT)


class SigV4RequestSigner:
    """Request signer applying the AWS Signature Version 4 algorithm.

    A signer holds only its immutable :py:class:`SigningConfig`; every call is
    computed from its inputs alone, so one instance can serve concurrent callers.
    The signing time is never taken from the clock. Requests must carry an
    ``x-amz-date`` field.
    """

    def __init__(self, config: SigningConfig):
        self.config = config
        self._canonicalizer = Canonicalizer(config)

    def sign(self, request: AWSRequest) -> AWSRequest:
        """Return a copy of ``request`` with an ``Authorization`` field applied.

        The supplied request is not modified.
        """
        credentials = self.generate_signed_authorization_header(request)
        new_request = deepcopy(request)
        new_request.fields.set_field(
            Field(name=AUTHORIZATION_HEADER, values=[credentials.render()])
        )
        return new_request

    def generate_signed_authorization_header(
        self, request: AWSRequest
    ) -> HttpCredentials:
        """Compute the SigV4 signature and render it as ``Authorization`` credentials.

        :param request: A fully materialized request carrying ``x-amz-date``.
        :raises MissingTimestampException: if ``x-amz-date`` is absent.
        :raises MalformedTimestampException: if ``x-amz-date`` cannot be parsed.
        :raises MissingPayloadException: if a body hash is required but there is
            no body.
        """
        result = self.compute_signature(request)
        return render_credentials(
            algorithm=self.config.algorithm,
            access_key=self.config.access_key,
            credential_scope=self.credential_scope(result.timestamp),
            signed_headers=self.config.signed_headers,
            signature=result.signature,
        )

    def compute_signature(self, request: AWSRequest) -> SignatureResult:
        timestamp = parse_timestamp(request)
        canonical_request = self._canonicalizer.canonical_request(
            request=request,
            timestamp=timestamp,
            payload_hash=self.payload_hash(request),
        )
        string_to_sign = self._string_to_sign(
            canonical_request=canonical_request, timestamp=timestamp
        )
        signing_key = derive_signing_key(
            secret_key=self.config.secret_key,
            date_stamp=timestamp.strftime(DATE_STAMP_FORMAT),
            region=self.config.region,
            service=self.config.service,
        )
        signature = to_hex(hmac_sha256(signing_key, string_to_sign))
        return SignatureResult(signature=signature, timestamp=timestamp)

    def canonical_request(
        self, request: AWSRequest, *, payload_hash: str | None = None
    ) -> str:
        """The canonical request is a standardized string laying out the components
        used in the SigV4 signing algorithm. This is useful to quickly compare inputs
        to find signature mismatches and unintended variances.

        :param request: The request to canonicalize.
        :param payload_hash: A precomputed payload hash. Computed from the request
            and the configured payload hash mode when omitted.
        """
        if payload_hash is None:
            payload_hash = self.payload_hash(request)
        return self._canonicalizer.canonical_request(
            request=request,
            timestamp=parse_timestamp(request),
            payload_hash=payload_hash,
        )

    def string_to_sign(self, request: AWSRequest) -> str:
        """The string to sign concatenates the signing algorithm, the signing time,
        the credential scope and the hash of the canonical request.

        The SigV4 specification defines the string to sign as:
            Algorithm \\n
            RequestDateTime \\n
            CredentialScope  \\n
            HashedCanonicalRequest
        """
        return self._string_to_sign(
            canonical_request=self.canonical_request(request),
            timestamp=parse_timestamp(request),
        )

    def _string_to_sign(self, *, canonical_request: str, timestamp: datetime) -> str:
        credential_scope = self.credential_scope(timestamp)
        canonical_request_hash = sha256_hex(canonical_request.encode("utf-8"))
        logger.debug(
            "Signing with scope %s, signed headers %s, canonical request hash %s",
            credential_scope,
            self.config.signed_headers,
            canonical_request_hash,
        )
        return "\n".join(
            (
                self.config.algorithm.upper(),
                timestamp.strftime(SIGV4_TIMESTAMP_FORMAT),
                credential_scope,
                canonical_request_hash,
            )
        )

    def credential_scope(self, timestamp: datetime) -> str:
        # Scope format: <YYYYMMDD>/<AWS Region>/<AWS Service>/aws4_request
        return "/".join(
            (
                timestamp.strftime(DATE_STAMP_FORMAT),
                self.config.region,
                self.config.service,
                SIGNING_REQUEST_TYPE,
            )
        )

    def payload_hash(self, request: AWSRequest) -> str:
        if self.config.payload_hash_mode is PayloadHashMode.UNSIGNED:
            return UNSIGNED_PAYLOAD

        body = request.body
        if body is None:
            raise MissingPayloadException(
                f"Payload hash mode {self.config.payload_hash_mode.name} requires a "
                "request body. Use b'' for an empty body."
            )
        if not isinstance(body, bytes | bytearray | memoryview):
            raise TypeError(
                "Request bodies must be fully read into bytes before signing, got "
                f"{type(body)}."
            )
        return sha256_hex(bytes(body))
