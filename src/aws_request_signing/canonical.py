# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from datetime import datetime
from enum import Enum
from urllib.parse import quote

from ._http import AWSRequest, ContentType
from .config import SigningConfig

SIGV4_TIMESTAMP_FORMAT: str = "%Y%m%dT%H%M%SZ"
HOST_HEADER: str = "host"
CONTENT_TYPE_HEADER: str = "content-type"
CONTENT_SHA256_HEADER: str = "x-amz-content-sha256"
DATE_HEADER: str = "x-amz-date"


class HeaderRole(Enum):
    """Canonical header names whose value is not read verbatim from the request."""

    HOST = HOST_HEADER
    CONTENT_TYPE = CONTENT_TYPE_HEADER
    CONTENT_SHA256 = CONTENT_SHA256_HEADER
    DATE = DATE_HEADER
    GENERIC = None

    @classmethod
    def of(cls, name: str) -> "HeaderRole":
        try:
            return cls(name)
        except ValueError:
            return cls.GENERIC


def encode_all_but_unreserved(value: str) -> str:
    """Percent-encode every character except ``A-Z a-z 0-9 - . _ ~``."""
    return quote(value, safe="")


class Canonicalizer:
    """Builds the SigV4 canonical request for a :py:class:`SigningConfig`.

    The canonical request is defined as::

        <HTTPMethod>\\n
        <CanonicalURI>\\n
        <CanonicalQueryString>\\n
        <CanonicalHeaders>\\n
        <SignedHeaders>\\n
        <HashedPayload>
    """

    def __init__(self, config: SigningConfig):
        self._config = config

    def canonical_request(
        self, *, request: AWSRequest, timestamp: datetime, payload_hash: str
    ) -> str:
        """Build the canonical request string.

        :param request: The request to sign. It is not modified.
        :param timestamp: The signing time read from the request's ``x-amz-date``.
        :param payload_hash: Hex SHA-256 of the body or ``UNSIGNED-PAYLOAD``.
        """
        lines = [
            request.method.upper(),
            self.canonical_uri(request=request),
            self.canonical_query(request=request),
            self.canonical_headers(
                request=request, timestamp=timestamp, payload_hash=payload_hash
            ),
            self._config.signed_headers,
            payload_hash,
        ]
        return "\n".join(lines)

    def canonical_uri(self, *, request: AWSRequest) -> str:
        uri = request.destination
        if not self._config.double_encode_path:
            return uri.path or "/"

        segments = uri.path_segments
        if not segments:
            # A single slash, not "//", for the root path.
            return "/"
        # Every service except S3 expects each segment to be encoded twice.
        encoded = (
            encode_all_but_unreserved(encode_all_but_unreserved(segment))
            for segment in segments
        )
        trailing_slash = "/" if (uri.path or "").endswith("/") else ""
        return f"/{'/'.join(encoded)}{trailing_slash}"

    def canonical_query(self, *, request: AWSRequest) -> str:
        params = request.destination.query_params
        pairs: list[str] = []
        for key in sorted(params):
            encoded_key = encode_all_but_unreserved(key)
            for value in sorted(params[key]):
                # "=" inside a value is encoded twice, everything else once.
                encoded_value = encode_all_but_unreserved(value.replace("=", "%3D"))
                pairs.append(f"{encoded_key}={encoded_value}")
        return "&".join(pairs)

    def canonical_headers(
        self, *, request: AWSRequest, timestamp: datetime, payload_hash: str
    ) -> str:
        return "".join(
            f"{name}:{self._header_value(name, request, timestamp, payload_hash)}\n"
            for name in self._config.canonical_header_names
        )

    def _header_value(
        self, name: str, request: AWSRequest, timestamp: datetime, payload_hash: str
    ) -> str:
        match HeaderRole.of(name):
            case HeaderRole.HOST:
                return request.destination.host
            case HeaderRole.CONTENT_TYPE:
                return self._content_type(request).render()
            case HeaderRole.CONTENT_SHA256:
                return payload_hash
            case HeaderRole.DATE:
                return timestamp.strftime(SIGV4_TIMESTAMP_FORMAT)
            case HeaderRole.GENERIC:
                field = request.fields.get(name)
                values = field.values if field is not None else []
                return ",".join(_trim_header_value(value) for value in values)

    def _content_type(self, request: AWSRequest) -> ContentType:
        field = request.fields.get(CONTENT_TYPE_HEADER)
        if field is not None and field.values:
            return ContentType.parse(field.values[0])
        return request.content_type


def _trim_header_value(value: str) -> str:
    return " ".join(value.split())
