# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Names of the HTTP headers used when pushing to and querying the services under
test.

Signing does not depend on this table; it reads raw field names from requests.
"""

from enum import Enum


class HttpHeader(Enum):
    AUTHORIZATION = "Authorization"
    WWW_AUTHENTICATE = "WWW-Authenticate"
    DATE = "Date"
    HOST = "Host"
    LOCATION = "Location"
    ORIGIN = "Origin"
    CONTENT_TYPE = "Content-Type"
    TIMEOUT = "Timeout"
    RESPONSE_REQUIRED = "response-required"
    X_CORRELATION_ID = "x-correlation-id"
    X_DITTO_PRE_AUTH = "x-ditto-pre-authenticated"
    """Carries a subject that was already authenticated by a trusted proxy."""

    X_THINGS_PARAMETER_ORDER = "x-things-parameter-order"
    ALLOW_POLICY_LOCKOUT = "allow-policy-lockout"
    PUT_METADATA = "put-metadata"
    CONDITION = "condition"

    @property
    def canonical_name(self) -> str:
        """The lower-cased name, as used for case-insensitive matching."""
        return self.value.lower()

    def __str__(self) -> str:
        return self.value


_BY_CANONICAL_NAME: dict[str, HttpHeader] = {
    header.canonical_name: header for header in HttpHeader
}


def lookup_by_name(name: str) -> HttpHeader | None:
    """Find the header whose name matches ``name`` ignoring case."""
    return _BY_CANONICAL_NAME.get(name.lower())


def canonical_string_of(header: HttpHeader) -> str:
    """The name of ``header`` as it is written on the wire."""
    return header.value
