"""Domain model - URL value objects.

Paths are held as ordered segment tuples and queries as ordered mappings so
that site/locale composition never splices strings. Conversion to text only
happens in ``ParsedUrl.parse`` and ``ParsedUrl.to_string``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Protocol, Self
from urllib.parse import urlsplit

from storefront_urls.utils.query_string import QueryMapping, merge_query, parse_query, serialize_query, split_url


class LocationLike(Protocol):
    """Anything exposing ``pathname`` and ``search`` (router or browser location)."""

    pathname: str
    search: str


@dataclass(frozen=True)
class Location:
    """Value object for the current location; only ``pathname`` and ``search`` are read."""

    pathname: str = "/"
    search: str = ""

    @classmethod
    def from_url(cls, url: str) -> Self:
        parsed = urlsplit(url)
        return cls(pathname=parsed.path or "/", search=f"?{parsed.query}" if parsed.query else "")


def _split_segments(path: str) -> tuple[str, ...]:
    if not path:
        return ()
    return tuple(path.lstrip("/").split("/"))


@dataclass(frozen=True)
class ParsedUrl:
    """Relative URL split into path segments, ordered query and fragment.

    ``"/"`` parses to ``("",)`` and ``"/uk/it-IT/"`` to ``("uk", "it-IT", "")``,
    so trailing slashes survive a round trip.
    """

    segments: tuple[str, ...] = ()
    query: QueryMapping = field(default_factory=dict)
    fragment: str = ""

    @classmethod
    def parse(cls, url: str) -> Self:
        """Parse a relative or absolute URL; scheme and host are discarded."""
        if "://" in url.split("?", 1)[0]:
            parsed = urlsplit(url)
            path, query, fragment = parsed.path or "/", parsed.query, parsed.fragment
        else:
            path, query, fragment = split_url(url)
        return cls(segments=_split_segments(path), query=parse_query(query), fragment=fragment)

    @classmethod
    def from_location(cls, location: LocationLike | str) -> Self:
        if isinstance(location, str):
            return cls.parse(location)
        return cls(segments=_split_segments(location.pathname or "/"), query=parse_query(location.search))

    @property
    def path(self) -> str:
        if not self.segments:
            return ""
        return "/" + "/".join(self.segments)

    @property
    def query_string(self) -> str:
        return serialize_query(self.query)

    def with_segments(self, segments: tuple[str, ...]) -> Self:
        return replace(self, segments=tuple(segments))

    def with_query(self, query: QueryMapping) -> Self:
        return replace(self, query=dict(query))

    def merge_query(self, updates: dict[str, Any] | None) -> Self:
        return self.with_query(merge_query(self.query, updates))

    def to_string(self, *, include_fragment: bool = True) -> str:
        url = self.path
        query = self.query_string
        if query:
            url = f"{url}?{query}"
        if include_fragment and self.fragment:
            url = f"{url}#{self.fragment}"
        return url

    def __str__(self) -> str:
        return self.to_string()
