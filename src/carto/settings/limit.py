"""Per-domain crawl limit.

A limit is either ``Infinite`` or ``Finite(count)``. In the preferences file
it is written the way a tagged enum reads naturally in YAML::

    domain_crawl_limit: Infinite

    domain_crawl_limit:
      Finite: 100
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from carto.constants import DEFAULT_DOMAIN_CRAWL_LIMIT, MAX_DOMAIN_CRAWL_LIMIT


class Infinite(BaseModel):
    """No bound on pages crawled per domain."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["Infinite"] = "Infinite"

    @property
    def is_infinite(self) -> bool:
        return True

    def allows(self, pages_crawled: int) -> bool:
        return True


class Finite(BaseModel):
    """At most ``count`` pages crawled per domain (sub-domains count separately)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["Finite"] = "Finite"
    count: int = Field(
        DEFAULT_DOMAIN_CRAWL_LIMIT,
        ge=0,
        le=MAX_DOMAIN_CRAWL_LIMIT,
        strict=True,
        description="Maximum pages crawled per domain",
    )

    @property
    def is_infinite(self) -> bool:
        return False

    def allows(self, pages_crawled: int) -> bool:
        """Check whether another page may be crawled.

        Args:
            pages_crawled: Pages already crawled for the domain

        Returns:
            True while the count is below the limit
        """
        return pages_crawled < self.count


Limit = Annotated[Union[Infinite, Finite], Field(discriminator="kind")]


def limit_from_yaml(value: Any) -> Any:
    """Convert the YAML form of a limit into its discriminated form.

    Unrecognised values are passed through untouched so that validation
    reports them.
    """
    if isinstance(value, (Infinite, Finite)):
        return value
    if value == "Infinite":
        return {"kind": "Infinite"}
    if isinstance(value, Mapping) and len(value) == 1:
        if "Finite" in value:
            return {"kind": "Finite", "count": value["Finite"]}
        if "Infinite" in value and value["Infinite"] is None:
            return {"kind": "Infinite"}
    return value


def limit_to_yaml(limit: Infinite | Finite) -> str | dict[str, int]:
    if isinstance(limit, Infinite):
        return "Infinite"
    return {"Finite": limit.count}
