"""Locale- and site-aware URL resolution for multi-site storefronts."""

from storefront_urls.app import bootstrap
from storefront_urls.config_store import get_config, load_config, reset_config, set_config
from storefront_urls.errors import ConfigurationError, UrlEngineError
from storefront_urls.url_config import SiteConfig, StorefrontConfig, UrlEncodingConfig
from storefront_urls.utils.resource_urls import (
    category_url_builder,
    home_url_builder,
    product_url_builder,
    search_url_builder,
)
from storefront_urls.utils.url_builder import (
    absolute_url,
    build_path_with_url_config,
    get_params_from_path,
    get_url_with_locale,
    rebuild_path_with_params,
    remove_query_params_from_path,
    resolve_locale_from_url,
    resolve_site_from_url,
)
from storefront_urls.utils.url_set import build_url_set


__all__ = [
    "ConfigurationError",
    "SiteConfig",
    "StorefrontConfig",
    "UrlEncodingConfig",
    "UrlEngineError",
    "absolute_url",
    "bootstrap",
    "build_path_with_url_config",
    "build_url_set",
    "category_url_builder",
    "get_config",
    "get_params_from_path",
    "get_url_with_locale",
    "home_url_builder",
    "load_config",
    "product_url_builder",
    "rebuild_path_with_params",
    "remove_query_params_from_path",
    "reset_config",
    "resolve_locale_from_url",
    "resolve_site_from_url",
    "search_url_builder",
    "set_config",
]
