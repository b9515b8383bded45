# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import hashlib
import hmac

from ._hex import to_hex
from .exceptions import UnsupportedHashAlgorithmException

SHA256: str = "sha256"


def _new_sha256(data: bytes = b""):
    try:
        return hashlib.new(SHA256, data)
    except ValueError as e:
        raise UnsupportedHashAlgorithmException(
            f"The {SHA256} digest is not available in this runtime."
        ) from e


def sha256_hex(data: bytes) -> str:
    return to_hex(_new_sha256(data).digest())


def hmac_sha256(key: bytes, msg: str | bytes) -> bytes:
    if isinstance(msg, str):
        msg = msg.encode("utf-8")
    try:
        return hmac.new(key=key, msg=msg, digestmod=SHA256).digest()
    except ValueError as e:
        raise UnsupportedHashAlgorithmException(
            f"HMAC with the {SHA256} digest is not available in this runtime."
        ) from e
