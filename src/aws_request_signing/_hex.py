# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0


def to_hex(data: bytes) -> str:
    """Render bytes as a lowercase hexadecimal string."""
    return data.hex()


def from_hex(value: str) -> bytes:
    """Parse a hexadecimal string back into bytes.

    :raises ValueError: if ``value`` has odd length or contains non-hex characters.
    """
    return bytes.fromhex(value)
