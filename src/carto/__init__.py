"""Carto configuration: storage locations, user preferences and lenses."""

from carto.store import ConfigStore

__all__ = ["ConfigStore"]
