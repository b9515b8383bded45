# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass

AUTHORIZATION_HEADER: str = "Authorization"


@dataclass(frozen=True)
class HttpCredentials:
    """The value of an ``Authorization`` header: a scheme plus its parameters."""

    scheme: str
    params: tuple[tuple[str, str], ...]

    def render(self) -> str:
        """Render as ``<scheme> <name>=<value>, <name>=<value>, ...``.

        Values are never quoted; AWS rejects quoted auth-params (RFC 7235). The
        space after each comma is required by some endpoints.
        """
        rendered_params = ", ".join(f"{name}={value}" for name, value in self.params)
        return f"{self.scheme} {rendered_params}"

    def __str__(self) -> str:
        return self.render()


def render_credentials(
    *,
    algorithm: str,
    access_key: str,
    credential_scope: str,
    signed_headers: str,
    signature: str,
) -> HttpCredentials:
    """Build the SigV4 credentials for an ``Authorization`` header.

    :param credential_scope: ``<YYYYMMDD>/<region>/<service>/aws4_request``
    :param signed_headers: Header names joined by ``;`` in canonical order.
    :param signature: Lowercase hex HMAC-SHA256 of the string to sign.
    """
    return HttpCredentials(
        scheme=algorithm.upper(),
        params=(
            ("Credential", f"{access_key}/{credential_scope}"),
            ("SignedHeaders", signed_headers),
            ("Signature", signature),
        ),
    )
