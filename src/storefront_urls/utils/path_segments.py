"""Insert, strip and read the leading site/locale path segments.

How many leading segments are site/locale tokens is decided only by the
encoding policy (0, 1 or 2), never by looking at segment contents. Site
precedes locale when both are path-encoded.
"""

from __future__ import annotations

from storefront_urls.url_config import UrlEncodingConfig


TOKEN_ORDER = ("site", "locale")

ROOT_SEGMENTS: tuple[str, ...] = ("",)


def path_token_names(url_config: UrlEncodingConfig) -> tuple[str, ...]:
    """Names of the path-encoded tokens, in URL order."""
    return tuple(name for name in TOKEN_ORDER if getattr(url_config, name) == "path")


def strip_path_tokens(segments: tuple[str, ...], url_config: UrlEncodingConfig) -> tuple[str, ...]:
    """Drop the leading site/locale segments, leaving the bare resource path.

    Examples:
        >>> policy = UrlEncodingConfig(locale="path", site="path")
        >>> strip_path_tokens(("uk", "it-IT", "category", "womens"), policy)
        ('category', 'womens')
        >>> strip_path_tokens(("uk", "it-IT", ""), policy)
        ('',)
    """
    count = len(path_token_names(url_config))
    bare = tuple(segments[count:])
    if not bare and segments:
        return ROOT_SEGMENTS
    return bare


def extract_path_tokens(segments: tuple[str, ...], url_config: UrlEncodingConfig) -> dict[str, str | None]:
    """Read the site/locale tokens from the leading segments.

    Tokens that are not path-encoded, or whose segment is missing or empty,
    come back as None.
    """
    tokens: dict[str, str | None] = dict.fromkeys(TOKEN_ORDER)
    for index, name in enumerate(path_token_names(url_config)):
        if index < len(segments) and segments[index]:
            tokens[name] = segments[index]
    return tokens


def insert_path_tokens(
    segments: tuple[str, ...],
    url_config: UrlEncodingConfig,
    *,
    site: str | None = None,
    locale: str | None = None,
) -> tuple[str, ...]:
    """Prefix the path-encoded tokens; empty tokens are skipped."""
    values = {"site": site, "locale": locale}
    prefix = tuple(value for name in path_token_names(url_config) if (value := values[name]))
    if not prefix:
        return tuple(segments)
    return (*prefix, *segments)
