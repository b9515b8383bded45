# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .._http import AWSRequest
    from ..credentials import HttpCredentials


@runtime_checkable
class HmacSigning(Protocol):
    """A keyed-hash request signer that authenticates outbound HTTP pushes."""

    def generate_signed_authorization_header(
        self, request: AWSRequest
    ) -> HttpCredentials:
        """Compute credentials for the ``Authorization`` header of ``request``."""
        ...
