"""Semantic URL builders for storefront resources.

Category, product and search builders return bare logical paths; locale and
site decoration is left to ``storefront_urls.utils.url_builder``. The home
builder is the exception: it decorates directly and keeps the URL clean for
the default site and locale.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any
from urllib.parse import quote

from storefront_urls.config_store import resolve_config
from storefront_urls.url_config import SiteConfig, StorefrontConfig
from storefront_urls.utils.query_string import COMPONENT_SAFE
from storefront_urls.utils.url_builder import build_path_with_url_config


logger = logging.getLogger(__name__)


def _resource_id(resource: Any) -> str:
    if isinstance(resource, Mapping):
        return str(resource["id"])
    if hasattr(resource, "id"):
        return str(resource.id)
    return str(resource)


def category_url_builder(category: Any) -> str:
    """``/category/{id}``; the id is passed through verbatim."""
    return f"/category/{_resource_id(category)}"


def product_url_builder(product: Any) -> str:
    """``/product/{id}``; the id is passed through verbatim."""
    return f"/product/{_resource_id(product)}"


def search_url_builder(term: str | None) -> str:
    """``/search?q={term}`` with the term URL-encoded; an empty term gives ``/search?q=``."""
    return f"/search?q={quote(term or '', safe=COMPONENT_SAFE)}"


def home_url_builder(
    base_path: str = "/",
    *,
    locale: str | None,
    site: SiteConfig | str | None,
    config: StorefrontConfig | None = None,
) -> str:
    """Build the home URL for ``site`` and ``locale``.

    The locale is omitted when it is the site's default locale. The site is
    omitted only when it is the configured default site and its locale is
    omitted too: the default storefront home stays ``/``, while another
    locale of the default site gives ``/uk/it-IT/``. A site reference that is
    not configured contributes no site token, and its locale is kept as given.

    Raises:
        ConfigurationError: If the configuration or its ``url`` policy is missing
    """
    active = resolve_config(config)
    resolved = site if isinstance(site, SiteConfig) else active.get_site_by_reference(site)

    if resolved is None:
        logger.debug("Home URL for unknown site reference", extra={"site_reference": site})
        return build_path_with_url_config(base_path, locale=locale, config=active)

    home_locale = None if locale == resolved.default_locale else locale
    home_site = None if home_locale is None and active.is_default_site(resolved) else resolved
    return build_path_with_url_config(base_path, locale=home_locale, site=home_site, config=active)
