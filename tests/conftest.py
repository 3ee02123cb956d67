"""
Pytest configuration and fixtures.
"""
import logging
from pathlib import Path

import pytest
import yaml

from worldcodes.config.countries import CountryRegistry, reset_registry
from worldcodes.domain.models import Country, Currency

ENV_VARS = ("ENVIRONMENT", "WORLDCODES_DATA_FILE", "WORLDCODES_DUPLICATE_POLICY", "WORLDCODES_LOG_LEVEL")


def make_country(common_name: str, numeric: str, alpha2: str, alpha3: str, region: str, subregion: str, **extra) -> Country:
    """Build a Country with placeholder names for fields a test does not care about."""
    fields = {
        "common_name": common_name,
        "common_native_name": extra.pop("common_native_name", common_name),
        "official_name": extra.pop("official_name", common_name),
        "official_native_name": extra.pop("official_native_name", common_name),
        "numeric_code": numeric,
        "two_letter_code": alpha2,
        "three_letter_code": alpha3,
        "region": region,
        "subregion": subregion,
        "dialing_code": extra.pop("dialing_code", "+0"),
    }
    fields.update(extra)
    return Country(**fields)


def country_record(country: Country) -> dict:
    """Plain mapping for a Country, as it would appear in the YAML dataset."""
    return country.model_dump()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep environment settings, the shared registry and root logging per test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level

    reset_registry()
    yield
    reset_registry()

    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_countries() -> list[Country]:
    """Small controlled dataset, in dataset order."""
    return [
        make_country(
            "United States", "840", "US", "USA", "Americas", "Northern America",
            official_name="United States of America",
            capital="Washington, D.C.",
            languages={"eng": "English"},
            currencies={"USD": Currency(name="United States dollar", symbol="$")},
            dialing_code="+1",
        ),
        make_country(
            "Germany", "276", "DE", "DEU", "Europe", "Western Europe",
            common_native_name="Deutschland",
            capital="Berlin",
            languages={"deu": "German"},
            currencies={"EUR": Currency(name="Euro", symbol="€")},
            dialing_code="+49",
        ),
        make_country("France", "250", "FR", "FRA", "Europe", "Western Europe", capital="Paris"),
        make_country("Norway", "578", "NO", "NOR", "Europe", "Northern Europe", capital="Oslo"),
        make_country("Japan", "392", "JP", "JPN", "Asia", "Eastern Asia", capital="Tokyo"),
        make_country("Bouvet Island", "074", "BV", "BVT", "Antarctic", ""),
    ]


@pytest.fixture
def registry(sample_countries) -> CountryRegistry:
    return CountryRegistry(sample_countries)


@pytest.fixture
def write_dataset(tmp_path):
    """Write Country records (or raw content) to a YAML file and return its path."""
    def _write(records, name: str = "countries.yml") -> Path:
        path = tmp_path / name
        if isinstance(records, str):
            path.write_text(records, encoding="utf-8")
            return path

        entries = [country_record(r) if isinstance(r, Country) else r for r in records]
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"countries": entries}, f, allow_unicode=True, sort_keys=False)
        return path

    return _write


@pytest.fixture
def sample_dataset(write_dataset, sample_countries) -> Path:
    return write_dataset(sample_countries)
