"""Process-wide holder for the active storefront URL configuration.

The configuration is loaded once at startup and only ever replaced as a whole
object, so concurrent readers always see a fully formed, frozen
``StorefrontConfig``. Builders accept an explicit ``config`` and fall back to
this holder.
"""

import logging
from pathlib import Path

from storefront_urls.config import Settings
from storefront_urls.errors import ConfigurationError
from storefront_urls.url_config import StorefrontConfig, UrlEncodingConfig


logger = logging.getLogger(__name__)

_config_holder: dict[str, StorefrontConfig | None] = {"config": None}


def set_config(config: StorefrontConfig) -> None:
    """Atomically replace the active configuration."""
    if not isinstance(config, StorefrontConfig):
        raise TypeError(f"Expected StorefrontConfig, got {type(config).__name__}")
    _config_holder["config"] = config
    logger.info(
        "Storefront URL configuration activated",
        extra={"site_ids": config.list_site_ids(), "default_site": config.default_site},
    )


def reset_config() -> None:
    """Drop the active configuration (used by tests and shutdown hooks)."""
    _config_holder["config"] = None


def get_config() -> StorefrontConfig:
    """Return the active configuration.

    Raises:
        ConfigurationError: If no configuration has been loaded
    """
    config = _config_holder["config"]
    if config is None:
        raise ConfigurationError("No storefront URL configuration loaded. Call load_config() at startup.")
    return config


def resolve_config(config: StorefrontConfig | None = None) -> StorefrontConfig:
    """Prefer an explicitly passed configuration over the process-wide one."""
    return config if config is not None else get_config()


def require_url_policy(config: StorefrontConfig | None = None) -> UrlEncodingConfig:
    """Return the locale/site encoding policy or fail.

    Raises:
        ConfigurationError: If there is no configuration or it has no ``url`` policy
    """
    active = resolve_config(config)
    if active.url is None:
        logger.error("Storefront URL configuration has no `url` policy")
        raise ConfigurationError("Cannot find `url` key. Please check your storefront configuration file.")
    return active.url


def load_config(path: Path | str | None = None, *, settings: Settings | None = None) -> StorefrontConfig:
    """Load the configuration from JSON and make it the active one.

    Args:
        path: Config file; defaults to ``Settings.storefront_config_path``
        settings: Settings instance to read the default path from

    Returns:
        The newly activated configuration
    """
    if path is None:
        path = (settings or Settings()).storefront_config_path
    config_path = Path(path)
    config = StorefrontConfig.from_json_file(config_path)
    logger.info("Loaded storefront URL configuration", extra={"config_path": config_path})
    set_config(config)
    return config
