"""Domain layer - URL value objects with no infrastructure dependencies.

- ``ParsedUrl``: path segments + ordered query + fragment
- ``Location``: the ``pathname``/``search`` pair read from a current location
"""

from storefront_urls.domain.model import Location, LocationLike, ParsedUrl


__all__ = ["Location", "LocationLike", "ParsedUrl"]
