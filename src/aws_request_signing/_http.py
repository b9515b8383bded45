# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable, Iterator
from copy import deepcopy
from dataclasses import dataclass
from typing import Self
from urllib.parse import parse_qsl, unquote, urlsplit, urlunsplit

import aws_request_signing.interfaces.http as interfaces_http

DEFAULT_CONTENT_TYPE: str = "application/octet-stream"


class Field(interfaces_http.Field):
    """A header name with one or more values.

    All field names are case insensitive and case-variance must be treated as
    equivalent. The name is preserved as supplied for transmission.
    """

    def __init__(self, *, name: str, values: Iterable[str] | None = None):
        self.name = name
        self.values: list[str] = list(values) if values is not None else []

    def add(self, value: str) -> None:
        """Append a value to a field."""
        self.values.append(value)

    def as_string(self, delimiter: str = ",") -> str:
        """Get delimited string of all values.

        If the ``Field`` has zero values, the empty string is returned.
        """
        return delimiter.join(self.values)

    def __eq__(self, other: object) -> bool:
        """Name and values must match.

        Values order must match.
        """
        if not isinstance(other, Field):
            return False
        return self.name == other.name and self.values == other.values

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, values={self.values!r})"


class Fields(interfaces_http.Fields):
    def __init__(self, initial: Iterable[interfaces_http.Field] | None = None):
        """Collection of header entries mapped by case-insensitive name.

        :param initial: Initial list of ``Field`` objects. Fields whose names only
            differ in case are merged, keeping the values in the order given.
        """
        self.entries: OrderedDict[str, interfaces_http.Field] = OrderedDict()
        for fld in initial or ():
            for value in fld.values:
                self.add(fld.name, value)
            if not fld.values and fld.name not in self:
                self.set_field(Field(name=fld.name))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> Self:
        """Build from raw ``(name, value)`` pairs as they appear on the wire."""
        fields = cls()
        for name, value in pairs:
            fields.add(name, value)
        return fields

    def add(self, name: str, value: str) -> None:
        """Append ``value`` to the field called ``name``, creating it if needed."""
        if name in self:
            self[name].add(value)
        else:
            self.set_field(Field(name=name, values=[value]))

    def set_field(self, field: interfaces_http.Field) -> None:
        """Set or override the entry for ``field.name``."""
        self.entries[self._normalize_field_name(field.name)] = field

    def get(
        self, key: str, default: interfaces_http.Field | None = None
    ) -> interfaces_http.Field | None:
        return self[key] if key in self else default

    def __getitem__(self, name: str) -> interfaces_http.Field:
        """Retrieve Field entry."""
        return self.entries[self._normalize_field_name(name)]

    def __delitem__(self, name: str) -> None:
        """Delete entry from collection."""
        del self.entries[self._normalize_field_name(name)]

    def _normalize_field_name(self, name: str) -> str:
        return name.lower()

    def __eq__(self, other: object) -> bool:
        """Entries must match in values and order."""
        if not isinstance(other, Fields):
            return False
        return self.entries == other.entries

    def __iter__(self) -> Iterator[interfaces_http.Field]:
        yield from self.entries.values()

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Fields({self.entries})"

    def __contains__(self, key: str) -> bool:
        return self._normalize_field_name(key) in self.entries


@dataclass(kw_only=True, frozen=True)
class URI(interfaces_http.URI):
    """Target location for an :py:class:`AWSRequest`."""

    scheme: str = "https"
    """For example ``http`` or ``https``."""

    host: str
    """The hostname, for example ``sqs.eu-central-1.amazonaws.com``."""

    port: int | None = None
    """An explicit port number."""

    path: str | None = None
    """Path component of the URI, as it will be sent."""

    query: str | None = None
    """Query component of the URI as string."""

    fragment: str | None = None
    """Part of the URI specification, but not transmitted by a client."""

    @classmethod
    def from_url(cls, url: str) -> Self:
        parts = urlsplit(url)
        if not parts.hostname:
            raise ValueError(f"URL {url!r} does not contain a host.")
        return cls(
            scheme=parts.scheme or "https",
            host=parts.hostname,
            port=parts.port,
            path=parts.path or None,
            query=parts.query or None,
            fragment=parts.fragment or None,
        )

    @property
    def path_segments(self) -> list[str]:
        """Decoded, non-empty path segments."""
        return [unquote(segment) for segment in (self.path or "").split("/") if segment]

    @property
    def query_params(self) -> dict[str, list[str]]:
        """Decoded query parameters, values kept in the order received."""
        params: dict[str, list[str]] = {}
        for key, value in parse_qsl(self.query or "", keep_blank_values=True):
            params.setdefault(key, []).append(value)
        return params

    @property
    def netloc(self) -> str:
        """Construct netloc string in format ``{host}:{port}``.

        ``port`` is only included if set.
        """
        if self.port is not None:
            return f"{self.host}:{self.port}"
        return self.host

    def build(self) -> str:
        """Construct URI string representation.

        Returns a string of the form ``{scheme}://{host}:{port}{path}?{query}#{fragment}``
        """
        components = (
            self.scheme,
            self.netloc,
            self.path or "",
            self.query or "",
            self.fragment or "",
        )
        return urlunsplit(components)


@dataclass(kw_only=True, frozen=True)
class ContentType:
    """A media type with an optional charset, as carried by ``Content-Type``."""

    media_type: str
    charset: str | None = None

    @classmethod
    def parse(cls, value: str) -> Self:
        """Split a ``Content-Type`` header value into media type and charset.

        Parameters other than ``charset`` stay part of the media type.
        """
        media_type, *params = (part.strip() for part in value.split(";"))
        charset = None
        for param in params:
            name, _, param_value = param.partition("=")
            if name.strip().lower() == "charset":
                charset = param_value.strip().strip('"') or None
            elif param:
                media_type = f"{media_type}; {name.strip()}={param_value.strip()}"
        return cls(media_type=media_type, charset=charset)

    def render(self) -> str:
        if self.charset is None:
            return self.media_type
        return f"{self.media_type}; charset={self.charset}"


class AWSRequest(interfaces_http.Request):
    def __init__(
        self,
        *,
        destination: URI,
        method: str,
        body: bytes | None,
        fields: Fields,
        content_type: ContentType | None = None,
    ):
        """A request whose body has been fully read before signing.

        :param content_type: The declared content type of ``body``. Used when no
            explicit ``Content-Type`` field is present; defaults to
            ``application/octet-stream``.
        """
        self.destination = destination
        self.method = method
        self.body = body
        self.fields = fields
        self.content_type = content_type or ContentType(media_type=DEFAULT_CONTENT_TYPE)

    def __deepcopy__(self, memo: dict[int, AWSRequest] | None = None) -> AWSRequest:
        if memo is None:
            memo = {}

        if id(self) in memo:
            return memo[id(self)]

        # destination, body and content type are immutable
        new_instance = self.__class__(
            destination=self.destination,
            body=self.body,
            method=self.method,
            fields=deepcopy(self.fields, memo),
            content_type=self.content_type,
        )
        memo[id(self)] = new_instance
        return new_instance
