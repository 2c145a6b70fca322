"""Storefront URL configuration using Pydantic.

This module defines the schema for the per-deployment URL policy: where the
locale and site tokens are encoded, which sites exist, their locales and the
default site.

Architecture:
- One ``StorefrontConfig`` per process, loaded at startup (fail fast)
- Models are frozen; a new configuration replaces the old one as a whole
- ``url`` may be absent in the file, builders then raise ``ConfigurationError``
"""

import json
import os
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


LocaleEncoding = Literal["path", "query_param"]
SiteEncoding = Literal["path", "query_param", "none"]


class UrlEncodingConfig(BaseModel):
    """Where the locale and site tokens live in generated URLs."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    locale: Annotated[
        LocaleEncoding,
        Field(
            description="Locale token position: leading path segment or `locale` query parameter",
        ),
    ]

    site: Annotated[
        SiteEncoding,
        Field(
            description="Site token position: leading path segment, `site` query parameter, or never encoded",
        ),
    ] = "none"


class SiteConfig(BaseModel):
    """A configured storefront instance with its own locales."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Annotated[str, Field(min_length=1, description="Site identifier (e.g., 'RefArchGlobal')")]

    alias: Annotated[
        str | None,
        Field(
            min_length=1,
            description="Short token used in URLs instead of the id (e.g., 'uk')",
        ),
    ] = None

    default_locale: Annotated[str, Field(min_length=1, description="Locale used when none is requested")]

    supported_locales: Annotated[
        tuple[str, ...],
        Field(
            min_length=1,
            description="Ordered locale identifiers this site serves",
            examples=[["en-GB", "fr-FR", "it-IT"]],
        ),
    ]

    @field_validator("supported_locales")
    @classmethod
    def validate_unique_locales(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        duplicates = sorted({locale for locale in value if value.count(locale) > 1})
        if duplicates:
            raise ValueError(f"Duplicate supported_locales entries: {duplicates}")
        return value

    @model_validator(mode="after")
    def validate_default_locale_supported(self) -> "SiteConfig":
        """The default locale must be one of the supported locales."""
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"Site '{self.id}' default_locale '{self.default_locale}' is not in supported_locales "
                f"{list(self.supported_locales)}"
            )
        return self

    @property
    def token(self) -> str:
        """Token written into URLs: the alias when configured, the id otherwise."""
        return self.alias or self.id

    def matches(self, reference: str) -> bool:
        return reference in (self.id, self.alias)

    def supports_locale(self, locale: str) -> bool:
        return locale in self.supported_locales


class StorefrontConfig(BaseModel):
    """Complete URL configuration for a storefront deployment.

    Example:
        {
            "url": {"locale": "path", "site": "path"},
            "default_site": "RefArchGlobal",
            "sites": [
                {
                    "id": "RefArchGlobal",
                    "alias": "uk",
                    "default_locale": "en-GB",
                    "supported_locales": ["en-GB", "fr-FR", "it-IT"]
                }
            ]
        }
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    url: Annotated[
        UrlEncodingConfig | None,
        Field(description="Locale/site encoding policy; required by every URL builder"),
    ] = None

    sites: Annotated[
        tuple[SiteConfig, ...],
        Field(
            min_length=1,
            description="Configured storefront sites",
        ),
    ]

    default_site: Annotated[str, Field(min_length=1, description="Id or alias of the site used when none is given")]

    app_origin: Annotated[
        str | None,
        Field(
            pattern=r"^https?://[^/]+$",
            description="Absolute origin used to build absolute URLs (e.g., 'https://shop.example.com')",
        ),
    ] = None

    @model_validator(mode="after")
    def validate_unique_site_tokens(self) -> "StorefrontConfig":
        """Ensure site ids and aliases do not collide."""
        tokens: list[str] = []
        for site in self.sites:
            tokens.append(site.id)
            if site.alias and site.alias != site.id:
                tokens.append(site.alias)
        if len(tokens) != len(set(tokens)):
            duplicates = sorted({t for t in tokens if tokens.count(t) > 1})
            raise ValueError(f"Duplicate site ids or aliases found: {duplicates}")
        return self

    @model_validator(mode="after")
    def validate_default_site_exists(self) -> "StorefrontConfig":
        if self.get_site_by_reference(self.default_site) is None:
            available = ", ".join(site.id for site in self.sites)
            raise ValueError(f"default_site '{self.default_site}' not found in sites. Available: {available}")
        return self

    @classmethod
    def from_json_file(cls, path: Path) -> "StorefrontConfig":
        """Load configuration from a JSON file.

        Environment variables can override:
        - DEFAULT_SITE: Override default_site (must reference a configured site)

        Args:
            path: Path to storefront.json

        Returns:
            Validated StorefrontConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not path.exists():
            raise FileNotFoundError(f"Storefront config not found: {path}")

        with path.open(encoding="utf-8") as f:
            data = json.load(f)

        if default_site := os.environ.get("DEFAULT_SITE"):
            data["default_site"] = default_site

        return cls.model_validate(data)

    def get_site(self, site_id: str) -> SiteConfig | None:
        """Get a site by its id."""
        for site in self.sites:
            if site.id == site_id:
                return site
        return None

    def get_site_by_reference(self, reference: str | None) -> SiteConfig | None:
        """Get a site by id or alias.

        Args:
            reference: Site id (e.g., 'RefArchGlobal') or alias (e.g., 'uk')

        Returns:
            SiteConfig if found, None otherwise
        """
        if not reference:
            return None
        for site in self.sites:
            if site.matches(reference):
                return site
        return None

    def get_default_site(self) -> SiteConfig:
        site = self.get_site_by_reference(self.default_site)
        # Guaranteed by validate_default_site_exists
        assert site is not None
        return site

    def is_default_site(self, site: SiteConfig) -> bool:
        return site.id == self.get_default_site().id

    def get_locale_by_reference(self, site: SiteConfig, reference: str | None) -> str | None:
        """Return the locale if ``site`` supports it, None otherwise."""
        if reference and site.supports_locale(reference):
            return reference
        return None

    def list_site_ids(self) -> list[str]:
        return [site.id for site in self.sites]
