import pytest
from pydantic import ValidationError

from carto.settings import Finite, Infinite, UserSettings
from carto.settings.limit import limit_from_yaml, limit_to_yaml


def test_default_limit() -> None:
    assert Finite() == Finite(count=100)
    assert UserSettings().domain_crawl_limit == Finite(count=100)


@pytest.mark.parametrize(
    "limit",
    [Infinite(), Finite(count=0), Finite(count=1), Finite(count=100), Finite(count=4294967295)],
)
def test_limit_survives_yaml(limit: Infinite | Finite, tmp_path) -> None:
    path = tmp_path / "settings.yaml"
    UserSettings(domain_crawl_limit=limit).save(path)
    assert UserSettings.load(path).domain_crawl_limit == limit


def test_yaml_forms() -> None:
    assert limit_to_yaml(Infinite()) == "Infinite"
    assert limit_to_yaml(Finite(count=7)) == {"Finite": 7}
    assert limit_from_yaml("Infinite") == {"kind": "Infinite"}
    assert limit_from_yaml({"Finite": 7}) == {"kind": "Finite", "count": 7}


@pytest.mark.parametrize("count", [-1, 4294967296])
def test_count_out_of_range(count: int) -> None:
    with pytest.raises(ValidationError):
        Finite(count=count)


def test_count_must_be_an_integer() -> None:
    with pytest.raises(ValidationError):
        UserSettings(domain_crawl_limit={"Finite": "lots"})


def test_unknown_variant_is_rejected() -> None:
    with pytest.raises(ValidationError):
        UserSettings(domain_crawl_limit="Unlimited")


def test_allows() -> None:
    assert Infinite().allows(10**9) is True
    assert Finite(count=2).allows(1) is True
    assert Finite(count=2).allows(2) is False
    assert Finite(count=0).allows(0) is False
    assert Infinite().is_infinite and not Finite().is_infinite
