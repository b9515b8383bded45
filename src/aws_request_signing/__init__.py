# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""AWS Request Signing computes AWS Signature Version 4 ``Authorization`` headers
for fully materialized HTTP requests without an AWS SDK."""

from __future__ import annotations

from ._http import AWSRequest, ContentType, Field, Fields, URI
from .canonical import Canonicalizer
from .config import PayloadHashMode, SigningConfig
from .credentials import HttpCredentials
from .headers import HttpHeader
from .interfaces.signing import HmacSigning
from .signers import SignatureResult, SigV4RequestSigner, derive_signing_key

__license__ = "Apache-2.0"
__version__ = "0.1.0"

__all__ = (
    "URI",
    "AWSRequest",
    "Canonicalizer",
    "ContentType",
    "Field",
    "Fields",
    "HmacSigning",
    "HttpCredentials",
    "HttpHeader",
    "PayloadHashMode",
    "SigV4RequestSigner",
    "SignatureResult",
    "SigningConfig",
    "derive_signing_key",
)
