"""Generate a set of URLs that differ by one query parameter (pagination, sorting)."""

from collections.abc import Iterable, Mapping
from typing import Any

from storefront_urls.domain.model import ParsedUrl


def build_url_set(
    url: str = "",
    key: str = "",
    values: Iterable[Any] | None = None,
    extra_params: Mapping[str, Any] | None = None,
) -> list[str]:
    """Build one URL per value of ``key``.

    Existing query parameters (valueless flags included) keep their position;
    ``key`` and then ``extra_params`` are merged in. Output order mirrors
    ``values`` with no deduplication.

    Examples:
        >>> build_url_set("/mens/clothing", "offset", [0, 5])
        ['/mens/clothing?offset=0', '/mens/clothing?offset=5']
    """
    if not values:
        return []

    base = ParsedUrl.parse(url)
    extras = dict(extra_params or {})
    return [base.merge_query({key: value, **extras}).to_string() for value in values]
