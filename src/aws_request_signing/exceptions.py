# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0


class BaseAWSSigningException(Exception):
    """Top-level exception to capture request signing errors."""


class MissingTimestampException(BaseAWSSigningException, KeyError):
    """The request does not carry the required signing timestamp header."""


class MalformedTimestampException(BaseAWSSigningException, ValueError):
    """The signing timestamp header does not match ``yyyyMMdd'T'HHmmss'Z'``."""


class MissingPayloadException(BaseAWSSigningException, ValueError):
    """A payload hash is required but the request has no body."""


class UnsupportedHashAlgorithmException(BaseAWSSigningException, RuntimeError):
    """SHA-256 is not available in this runtime."""


class InvalidSigningConfigException(BaseAWSSigningException, ValueError):
    """A SigningConfig was constructed with invalid values."""
