"""Shared test fixtures and configuration."""

import logging
import os

import pytest

from storefront_urls.config_store import reset_config, set_config
from storefront_urls.observability.context import clear_request_context
from storefront_urls.url_config import StorefrontConfig


# Complete test environment that overrides ALL possible settings values
TEST_ENV = {
    "STOREFRONT_CONFIG_PATH": "storefront.json",
    "LOG_LEVEL": "info",
    "LOG_JSON_OUTPUT": "true",
    "LOGGER_LEVELS": "",
}

# Variables that must not leak from the developer environment
CLEARED_ENV = ("DEFAULT_SITE",)


# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value


MOCK_CONFIG_DATA = {
    "url": {"locale": "path", "site": "path"},
    "default_site": "RefArchGlobal",
    "app_origin": "https://www.example.com",
    "sites": [
        {
            "id": "RefArchGlobal",
            "alias": "uk",
            "default_locale": "en-GB",
            "supported_locales": ["en-GB", "fr-FR", "it-IT"],
        },
        {
            "id": "RefArch",
            "alias": "us",
            "default_locale": "en-US",
            "supported_locales": ["en-US", "fr-FR"],
        },
    ],
}


def _build_config(**overrides) -> StorefrontConfig:
    return StorefrontConfig.model_validate({**MOCK_CONFIG_DATA, **overrides})


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset env vars, the process-wide configuration and the request context per test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    for key in CLEARED_ENV:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    clear_request_context()
    yield
    reset_config()
    clear_request_context()


@pytest.fixture
def mock_config() -> StorefrontConfig:
    return _build_config()


@pytest.fixture
def config_factory():
    """Build configurations from the mock data with top-level overrides, e.g. url=None."""
    return _build_config


@pytest.fixture
def active_config(mock_config: StorefrontConfig) -> StorefrontConfig:
    """Install the mock configuration as the process-wide one."""
    set_config(mock_config)
    return mock_config


@pytest.fixture
def restore_root_logger():
    """Give a test the root logger and put its handlers and level back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
