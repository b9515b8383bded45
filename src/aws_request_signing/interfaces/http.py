# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterator
from typing import Protocol, runtime_checkable


class Field(Protocol):
    """A name-value pair representing a single header in a request.

    All field names are case insensitive and case-variance must be treated as
    equivalent. Names may be normalized but should be preserved for accuracy during
    transmission.
    """

    name: str
    values: list[str]

    def add(self, value: str) -> None:
        """Append a value to a field."""
        ...

    def as_string(self, delimiter: str = ",") -> str:
        """Serialize the ``Field``'s values into a single line string."""
        ...


class Fields(Protocol):
    """Mapping of request headers keyed by their case-insensitive name."""

    # Entries are keyed off the lower-cased name of a provided Field
    entries: OrderedDict[str, Field]

    def set_field(self, field: Field) -> None:
        """Alias for __setitem__ to utilize the field.name for the entry key."""
        ...

    def __getitem__(self, name: str) -> Field:
        """Retrieve Field entry."""
        ...

    def __contains__(self, name: str) -> bool:
        """Case-insensitive membership check."""
        ...

    def __iter__(self) -> Iterator[Field]:
        """Allow iteration over entries."""
        ...

    def __len__(self) -> int:
        """Get total number of Field entries."""
        ...


@runtime_checkable
class URI(Protocol):
    """Target location for a :py:class:`Request`."""

    scheme: str
    """For example ``http`` or ``https``."""

    host: str
    """The hostname, for example ``sqs.us-east-1.amazonaws.com``."""

    port: int | None
    """An explicit port number."""

    path: str | None
    """Path component of the URI, as it will be sent."""

    query: str | None
    """Query component of the URI as string."""

    @property
    def path_segments(self) -> list[str]:
        """Decoded, non-empty path segments."""
        ...

    @property
    def query_params(self) -> dict[str, list[str]]:
        """Decoded query parameters, values kept in the order received."""
        ...

    def build(self) -> str:
        """Construct URI string representation."""
        ...


class Request(Protocol):
    """A fully materialized request ready to be signed."""

    destination: URI
    method: str
    fields: Fields
    body: bytes | None
