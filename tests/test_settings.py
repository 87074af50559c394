from pathlib import Path

import pytest
from pydantic import ValidationError

from carto.errors import PreferencesReadError, PreferencesWriteError
from carto.settings import Finite, Infinite, Lense, UserSettings


CUSTOM_YAML = """\
domain_crawl_limit: Infinite
run_wizard: true
allow_list:
  - example.com
block_list:
  - ads.example.net
"""


def test_defaults() -> None:
    settings = UserSettings()
    assert settings.domain_crawl_limit == Finite(count=100)
    assert settings.run_wizard is False
    assert settings.allow_list == []
    assert settings.block_list == []


def test_dump_yaml_is_readable() -> None:
    text = UserSettings().dump_yaml()
    assert text.splitlines() == [
        "domain_crawl_limit:",
        "  Finite: 100",
        "run_wizard: false",
        "allow_list: []",
        "block_list: []",
    ]


def test_load_custom_values(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(CUSTOM_YAML)
    settings = UserSettings.load(path)
    assert settings.domain_crawl_limit == Infinite()
    assert settings.run_wizard is True
    assert settings.allow_list == ["example.com"]
    assert settings.block_list == ["ads.example.net"]


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    original = UserSettings(
        domain_crawl_limit=Finite(count=42),
        run_wizard=True,
        allow_list=["a.example", "b.example"],
        block_list=["c.example"],
    )
    original.save(path)
    assert UserSettings.load(path) == original


def test_invalid_syntax(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("run_wizard: [true\nallow_list: {")
    with pytest.raises(PreferencesReadError) as excinfo:
        UserSettings.load(path)
    assert excinfo.value.path == path


@pytest.mark.parametrize(
    "content",
    [
        "",
        "run_wizard: maybe\n",
        "allow_list: example.com\n",
        "unexpected_key: 1\n",
        "domain_crawl_limit: {kind: Finite, count: 5, junk: 1}\n",
    ],
)
def test_schema_mismatch(tmp_path: Path, content: str) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(content)
    with pytest.raises(PreferencesReadError):
        UserSettings.load(path)


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PreferencesReadError):
        UserSettings.load(tmp_path / "nope.yaml")


def test_save_into_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(PreferencesWriteError):
        UserSettings().save(tmp_path / "missing" / "settings.yaml")


def test_assignment_is_validated() -> None:
    settings = UserSettings()
    settings.domain_crawl_limit = "Infinite"
    assert settings.domain_crawl_limit == Infinite()
    with pytest.raises(ValidationError):
        settings.run_wizard = "sometimes"


def test_allow_list_wins_over_block_list() -> None:
    settings = UserSettings(allow_list=["example.com"], block_list=["example.com", "bad.example"])
    assert settings.is_allowed("example.com") is True
    assert settings.is_blocked("example.com") is False
    assert settings.is_blocked("bad.example") is True
    assert settings.is_blocked("other.example") is False


def test_lense_defaults() -> None:
    lens = Lense(name="rust")
    assert lens.domains == []
    assert lens.urls == []
    lens = Lense(name="docs", domains=["not a domain"], urls=["::"])
    assert lens.domains == ["not a domain"]
