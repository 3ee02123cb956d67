import json

import pytest
from typer.testing import CliRunner

from worldcodes import __version__
from worldcodes.cli import app

runner = CliRunner()


@pytest.fixture
def invoke(sample_dataset):
    """Run the CLI against the small sample dataset."""
    def _invoke(*args):
        return runner.invoke(app, ["--data-file", str(sample_dataset), *args])
    return _invoke


def test_lookup_prints_record(invoke):
    result = invoke("lookup", "us")
    assert result.exit_code == 0
    assert "Common Name: United States" in result.output
    assert "Official Name: United States of America" in result.output
    assert "Numeric Code: 840" in result.output
    assert "Language: English (eng)" in result.output
    assert "Currency: United States dollar (USD, $)" in result.output
    assert "Dialing Code: +1" in result.output


def test_lookup_by_numeric_and_alpha3(invoke):
    assert "Common Name: Germany" in invoke("lookup", "276").output
    assert "Common Name: Germany" in invoke("lookup", "deu").output


def test_lookup_json(invoke):
    result = invoke("lookup", "DE", "--json")
    assert result.exit_code == 0
    record = json.loads(result.output)
    assert record["common_native_name"] == "Deutschland"
    assert record["three_letter_code"] == "DEU"
    assert record["currencies"]["EUR"] == {"name": "Euro", "symbol": "€"}


def test_lookup_not_found(invoke):
    result = invoke("lookup", "ZZ")
    assert result.exit_code == 1
    assert "No country found for code 'ZZ'" in result.output


def test_region(invoke):
    result = invoke("region", "EUROPE")
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "DE  DEU  276  Germany"
    assert lines[1] == "FR  FRA  250  France"
    assert lines[2] == "NO  NOR  578  Norway"
    assert "3 countries" in result.output


def test_region_not_found(invoke):
    result = invoke("region", "Atlantis")
    assert result.exit_code == 1
    assert "No countries found in region 'Atlantis'" in result.output
    assert "Available regions: Americas, Antarctic, Asia, Europe" in result.output


def test_subregion(invoke):
    result = invoke("subregion", "eastern asia")
    assert result.exit_code == 0
    assert "JP  JPN  392  Japan" in result.output
    assert "1 countries" in result.output

    assert invoke("subregion", "Eastern").exit_code == 1


def test_list_regions(invoke):
    result = invoke("list-regions")
    assert result.exit_code == 0
    assert "Available Regions" in result.output
    assert "* Europe (3)" in result.output
    assert "* Antarctic (1)" in result.output


def test_list_subregions(invoke):
    result = invoke("list-regions", "--subregions")
    assert result.exit_code == 0
    assert "Available Subregions" in result.output
    assert "* Western Europe (2)" in result.output
    assert "* Northern America (1)" in result.output


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"worldcodes version: {__version__}" in result.output


def test_bundled_dataset_by_default():
    result = runner.invoke(app, ["lookup", "840"])
    assert result.exit_code == 0
    assert "Common Name: United States" in result.output
    assert "Capital: Washington, D.C." in result.output


def test_data_file_from_environment(monkeypatch, sample_dataset):
    monkeypatch.setenv("WORLDCODES_DATA_FILE", str(sample_dataset))
    result = runner.invoke(app, ["list-regions"])
    assert result.exit_code == 0
    assert "Oceania" not in result.output


def test_missing_data_file(tmp_path):
    result = runner.invoke(app, ["--data-file", str(tmp_path / "missing.yml"), "lookup", "us"])
    assert result.exit_code == 1
    assert "Country dataset not found" in result.output


def test_invalid_configuration(monkeypatch):
    monkeypatch.setenv("WORLDCODES_DUPLICATE_POLICY", "sometimes")
    result = runner.invoke(app, ["lookup", "us"])
    assert result.exit_code == 1
    assert "Invalid dataset configuration" in result.output


def test_duplicate_policy_error_from_environment(monkeypatch, write_dataset, sample_countries):
    path = write_dataset(sample_countries + [sample_countries[0]])
    monkeypatch.setenv("WORLDCODES_DUPLICATE_POLICY", "error")
    result = runner.invoke(app, ["--data-file", str(path), "lookup", "us"])
    assert result.exit_code == 1
    assert "Duplicate numeric code '840'" in result.output


def test_verbose_logs_debug(invoke):
    result = invoke("--verbose", "lookup", "us")
    assert result.exit_code == 0
    assert "[DEBUG]" in result.output


def test_data_file_option_must_be_yaml(tmp_path):
    data_file = tmp_path / "countries.json"
    data_file.write_text("{}", encoding="utf-8")
    result = runner.invoke(app, ["--data-file", str(data_file), "lookup", "us"])
    assert result.exit_code == 1
    assert "must be YAML" in result.output


def test_data_file_option_accepts_yaml_suffix(write_dataset, sample_countries):
    path = write_dataset(sample_countries, name="countries.YAML")
    result = runner.invoke(app, ["--data-file", str(path), "lookup", "jp"])
    assert result.exit_code == 0
    assert "Common Name: Japan" in result.output
