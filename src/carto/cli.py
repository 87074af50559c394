"""Carto configuration CLI.

This module is the startup edge for configuration: it bootstraps the
ConfigStore and turns any ConfigError into a non-zero process exit with a
readable message. It also offers a few helpers for inspecting and
validating the user's preferences.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer

from carto.errors import ConfigError
from carto.paths import default_resolver
from carto.settings.user import UserSettings
from carto.store import ConfigStore

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Carto configuration CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "carto.cli"

DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
FILE_ARGUMENT = typer.Argument(..., help="Preferences file to validate")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _fail(exc: ConfigError) -> typer.Exit:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    if exc.original_error is not None:
        typer.secho(f"  {exc.original_error}", fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def bootstrap() -> ConfigStore:
    """Initialize configuration or terminate the process.

    Raises:
        typer.Exit: With code 1 if configuration cannot be prepared
    """
    try:
        return ConfigStore.initialize()
    except ConfigError as exc:
        logger.error("Configuration bootstrap failed: %s", exc)
        raise _fail(exc) from exc


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("init")
def init(debug: bool = DEBUG_OPTION) -> None:
    """Create the configuration directories and default preferences."""
    _configure_logging(debug)
    store = bootstrap()
    typer.echo(f"Preferences: {store.paths.prefs_file()}")


@config_app.command("show")
def show(debug: bool = DEBUG_OPTION) -> None:
    """Print the current user preferences as YAML."""
    _configure_logging(debug)
    store = bootstrap()
    typer.echo(store.user_settings.dump_yaml(), nl=False)


@config_app.command("paths")
def paths() -> None:
    """Print the resolved configuration locations."""
    resolver = default_resolver()
    try:
        locations = {
            "data_dir": resolver.data_dir(),
            "prefs_dir": resolver.prefs_dir(),
            "prefs_file": resolver.prefs_file(),
            "lenses_dir": resolver.lenses_dir(),
        }
    except ConfigError as exc:
        raise _fail(exc) from exc
    for name, location in locations.items():
        typer.echo(f"{name}: {location}")


@config_app.command("validate")
def validate_config(file: Path = FILE_ARGUMENT) -> None:
    """Validate a preferences file against the schema."""
    try:
        UserSettings.load(file)
    except ConfigError as exc:
        raise _fail(exc) from exc
    typer.echo("✅ Preferences valid")


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
