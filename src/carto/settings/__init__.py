"""User settings and lens definitions.

This package provides:
- UserSettings: User preferences persisted to settings.yaml
- Limit: Per-domain crawl bound, either Infinite or Finite(count)
- Lense: A named set of domains and URLs that scopes a search
"""

from carto.settings.lens import Lense
from carto.settings.limit import Finite, Infinite, Limit
from carto.settings.user import UserSettings

__all__ = [
    "Finite",
    "Infinite",
    "Lense",
    "Limit",
    "UserSettings",
]
