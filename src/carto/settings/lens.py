"""Lens definitions."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Lense(BaseModel):
    """A set of domains and URLs that restricts a search space.

    Lenses are keyed by ``name`` in the registry. Domains and URLs are
    kept as given; their syntax is not checked here.
    """

    name: str = Field(..., description="Unique name of the lens")
    domains: list[str] = Field(default_factory=list, description="Domains in scope")
    urls: list[str] = Field(default_factory=list, description="Individual URLs in scope")
