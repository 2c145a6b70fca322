"""Error types raised by the URL engine."""


class UrlEngineError(Exception):
    """Base error for the storefront URL engine."""


class ConfigurationError(UrlEngineError):
    """Raised when the URL configuration is absent or incomplete.

    Not recoverable at call time: an unconfigured deployment cannot produce
    correct links, so the deployment configuration has to be fixed.
    """
