"""User preferences persisted to settings.yaml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
)

from carto.errors import PreferencesReadError
from carto.settings.limit import Finite, Infinite, Limit, limit_from_yaml, limit_to_yaml
from carto.utils.file import write_text_file

logger: Final = logging.getLogger(__name__)


class UserSettings(BaseModel):
    """User preferences for crawling behavior and first-run setup.

    Every field has a default, so ``UserSettings()`` is always a valid
    record. Unknown keys in the preferences file are rejected rather than
    silently dropped.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    domain_crawl_limit: Limit = Field(
        default_factory=Finite,
        description="Pages allowed per domain; sub-domains are treated as separate domains",
    )
    run_wizard: bool = Field(False, description="Run the setup wizard on next start")
    allow_list: list[str] = Field(
        default_factory=list,
        description="Domains explicitly allowed, regardless of the block list",
    )
    block_list: list[str] = Field(
        default_factory=list, description="Domains explicitly blocked from crawling"
    )

    # ---- validators ----
    @field_validator("domain_crawl_limit", mode="before")
    @classmethod
    def parse_crawl_limit(cls, v: Any) -> Any:
        return limit_from_yaml(v)

    @field_serializer("domain_crawl_limit")
    def serialize_crawl_limit(self, v: Infinite | Finite) -> str | dict[str, int]:
        return limit_to_yaml(v)

    # ---- convenience methods ----
    def is_allowed(self, domain: str) -> bool:
        """Check if a domain is on the allow list."""
        return domain in self.allow_list

    def is_blocked(self, domain: str) -> bool:
        """Check if a domain is blocked.

        An allow list entry wins over a block list entry for the same domain.

        Args:
            domain: Domain name as stored in the lists

        Returns:
            True if the domain is on the block list and not on the allow list
        """
        return domain in self.block_list and not self.is_allowed(domain)

    # ---- persistence ----
    def dump_yaml(self) -> str:
        """Render the settings as human-editable YAML, in field order."""
        return yaml.safe_dump(
            self.model_dump(),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )

    def save(self, path: Path) -> None:
        """Write the settings to a YAML file, replacing its contents.

        Args:
            path: Destination preferences file

        Raises:
            PreferencesWriteError: If the file cannot be written
        """
        write_text_file(path, self.dump_yaml())
        logger.debug("Saved user preferences to %s", path)

    @classmethod
    def load(cls, path: Path) -> UserSettings:
        """Load settings from a YAML file.

        A missing, unreadable, syntactically broken or schema-mismatched
        file is an error. Nothing is defaulted here, so corrupt user data
        is never papered over.

        Args:
            path: Preferences file to read

        Returns:
            Validated UserSettings object

        Raises:
            PreferencesReadError: If the file cannot be read, parsed or validated
        """
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise PreferencesReadError("Unable to read user preferences file", path, exc) from exc
        except yaml.YAMLError as exc:
            raise PreferencesReadError("Unable to parse user preferences file", path, exc) from exc

        try:
            settings = cls.model_validate(data)
        except ValidationError as err:
            raise PreferencesReadError("Invalid user preferences file", path, err) from err

        logger.debug("Loaded user preferences from %s", path)
        return settings
