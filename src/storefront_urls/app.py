"""Process-start wiring: logging first, then the storefront URL configuration."""

import logging

from storefront_urls.config import Settings
from storefront_urls.config_store import load_config
from storefront_urls.observability import configure_logging
from storefront_urls.url_config import StorefrontConfig


logger = logging.getLogger(__name__)


def bootstrap(settings: Settings | None = None) -> StorefrontConfig:
    """Configure logging and load the configuration named by ``settings``.

    Raises:
        FileNotFoundError: If the configuration file is missing
        ValueError: If the configuration is invalid
    """
    settings = settings or Settings()
    configure_logging(
        level=settings.log_level,
        json_output=settings.log_json_output,
        logger_levels=settings.get_logger_levels(),
    )
    config = load_config(settings=settings)
    logger.info(
        "Storefront URL engine ready",
        extra={
            "locale_encoding": config.url.locale if config.url else None,
            "site_encoding": config.url.site if config.url else None,
        },
    )
    return config
