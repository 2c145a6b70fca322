"""Locale- and site-aware URL building and resolution.

All path-vs-query decisions for the locale and site tokens are made here, from
the ``UrlEncodingConfig`` of the active configuration:

- ``path``: leading path segment, site before locale (``/uk/en-GB/...``)
- ``query_param``: ``site=`` / ``locale=`` query parameters
- ``none`` (site only): never emitted

Every function takes an optional ``config``; without one the process-wide
configuration from ``storefront_urls.config_store`` is used.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any
from urllib.parse import urljoin

from storefront_urls.config_store import require_url_policy, resolve_config
from storefront_urls.domain.model import LocationLike, ParsedUrl
from storefront_urls.errors import ConfigurationError
from storefront_urls.url_config import SiteConfig, StorefrontConfig, UrlEncodingConfig
from storefront_urls.utils.path_segments import (
    extract_path_tokens,
    insert_path_tokens,
    strip_path_tokens,
)
from storefront_urls.utils.query_string import VALUELESS


logger = logging.getLogger(__name__)


def site_token(site: SiteConfig | str | None) -> str | None:
    """Token for ``site``: alias or id for a SiteConfig, the string itself otherwise."""
    if isinstance(site, SiteConfig):
        return site.token
    return site or None


def _query_token_updates(
    url_config: UrlEncodingConfig, *, site: str | None, locale: str | None
) -> dict[str, str]:
    updates: dict[str, str] = {}
    if url_config.site == "query_param" and site:
        updates["site"] = site
    if url_config.locale == "query_param" and locale:
        updates["locale"] = locale
    return updates


def _compose(
    parsed: ParsedUrl,
    url_config: UrlEncodingConfig,
    *,
    site: str | None,
    locale: str | None,
) -> ParsedUrl:
    segments = insert_path_tokens(parsed.segments, url_config, site=site, locale=locale)
    updates = _query_token_updates(url_config, site=site, locale=locale)
    return parsed.with_segments(segments).merge_query(updates)


def build_path_with_url_config(
    path: str,
    *,
    locale: str | None = None,
    site: SiteConfig | str | None = None,
    query_params: Mapping[str, Any] | None = None,
    config: StorefrontConfig | None = None,
) -> str:
    """Decorate ``path`` with the locale and site tokens per the URL policy.

    Args:
        path: Relative path, optionally with a query string
        locale: Locale token; empty values are omitted
        site: Site (or site token); empty values are omitted
        query_params: Extra query parameters merged after the tokens
        config: Explicit configuration; defaults to the active one

    Returns:
        Relative URL

    Raises:
        ConfigurationError: If the configuration or its ``url`` policy is missing

    Examples:
        With ``{"locale": "path", "site": "path"}``:
        ``build_path_with_url_config("/women/dresses", locale="en-GB", site="uk")``
        gives ``/uk/en-GB/women/dresses``; with ``locale="query_param"`` it
        gives ``/uk/women/dresses?locale=en-GB``.
    """
    url_config = require_url_policy(config)
    composed = _compose(ParsedUrl.parse(path), url_config, site=site_token(site), locale=locale)
    return composed.merge_query(dict(query_params or {})).to_string()


def _read_tokens(parsed: ParsedUrl, url_config: UrlEncodingConfig) -> dict[str, str | None]:
    tokens = extract_path_tokens(parsed.segments, url_config)
    for name in ("site", "locale"):
        if getattr(url_config, name) != "query_param":
            continue
        value = parsed.query.get(name)
        tokens[name] = value if value and value is not VALUELESS else None
    return tokens


def _site_for_reference(active: StorefrontConfig, reference: str | None) -> SiteConfig:
    site = active.get_site_by_reference(reference)
    if site is None:
        if reference:
            logger.debug("Unknown site reference, using default site", extra={"site_reference": reference})
        return active.get_default_site()
    return site


def get_url_with_locale(
    locale: str,
    *,
    location: LocationLike | str,
    site: SiteConfig | str | None = None,
    disallow_params: Iterable[str] = (),
    config: StorefrontConfig | None = None,
) -> str:
    """Rewrite the current location for another locale.

    The site/locale segments of ``location`` are stripped according to the
    policy, then ``site`` and ``locale`` are re-applied. Keys in
    ``disallow_params`` are removed from the query. The fragment is dropped.

    Args:
        locale: Target locale
        location: Current location (``pathname`` + ``search``) or URL string
        site: Site to encode; defaults to the site referenced by ``location``,
            then to the configured default site
        disallow_params: Query keys to drop (e.g. stale refinements)
        config: Explicit configuration; defaults to the active one

    Returns:
        Relative URL for ``locale``
    """
    active = resolve_config(config)
    url_config = require_url_policy(active)

    parsed = ParsedUrl.from_location(location)
    token = site_token(site) or _site_for_reference(active, _read_tokens(parsed, url_config)["site"]).token
    bare = parsed.with_segments(strip_path_tokens(parsed.segments, url_config))
    composed = _compose(bare, url_config, site=token, locale=locale)
    composed = composed.merge_query(dict.fromkeys(disallow_params))

    relative_url = composed.to_string(include_fragment=False)
    logger.debug(
        "Rewrote location for locale",
        extra={"from_path": parsed.path, "to_url": relative_url, "locale": locale, "site": token},
    )
    return relative_url


def rebuild_path_with_params(url: str, params: Mapping[str, Any]) -> str:
    """Merge ``params`` into the query of ``url``; None values delete keys.

    Path segments and fragment are never altered.
    """
    return ParsedUrl.parse(url).merge_query(dict(params)).to_string()


def remove_query_params_from_path(url: str, keys: Iterable[str]) -> str:
    """Remove ``keys`` from the query of ``url``; unknown keys are ignored."""
    return rebuild_path_with_params(url, dict.fromkeys(keys))


def get_params_from_path(url: str, config: StorefrontConfig | None = None) -> dict[str, str | None]:
    """Read the site and locale tokens back out of ``url``.

    Returns:
        ``{"site": ..., "locale": ...}``; None for tokens that are absent or
        not encoded by the policy
    """
    url_config = require_url_policy(config)
    return _read_tokens(ParsedUrl.parse(url), url_config)


def resolve_site_from_url(url: str, config: StorefrontConfig | None = None) -> SiteConfig:
    """Return the site referenced by ``url``, or the default site."""
    active = resolve_config(config)
    return _site_for_reference(active, get_params_from_path(url, active)["site"])


def resolve_locale_from_url(url: str, config: StorefrontConfig | None = None) -> str:
    """Return the locale referenced by ``url`` if its site supports it, else the site default."""
    active = resolve_config(config)
    site = resolve_site_from_url(url, active)
    reference = get_params_from_path(url, active)["locale"]
    return active.get_locale_by_reference(site, reference) or site.default_locale


def absolute_url(path: str, config: StorefrontConfig | None = None, *, origin: str | None = None) -> str:
    """Join a relative ``path`` onto ``origin`` or the configured ``app_origin``.

    Raises:
        ConfigurationError: If no origin is given or configured
    """
    if origin is None:
        origin = resolve_config(config).app_origin
    if not origin:
        raise ConfigurationError("Cannot build an absolute URL without `app_origin`.")
    return urljoin(origin.rstrip("/") + "/", path.lstrip("/"))
