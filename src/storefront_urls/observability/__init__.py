"""Observability module: structured logging with request correlation."""

from storefront_urls.observability.context import (
    clear_request_context,
    get_request_context,
    request_context,
    set_request_context,
)
from storefront_urls.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "clear_request_context",
    "configure_logging",
    "get_request_context",
    "request_context",
    "set_request_context",
]
