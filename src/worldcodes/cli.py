import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated, Optional

import typer

from .config.countries import CountryRegistry
from .config.settings import Config, ConfigurationError
from .data_loader import load_countries
from .domain.models import Country
from .types import DatasetError
from .utils import setup_logging

app = typer.Typer(help="ISO 3166-1 country reference lookups")

logger = logging.getLogger(__name__)


class _State:
    """Options shared by every command, set in the app callback."""
    data_file: Optional[Path] = None
    verbose: bool = False


state = _State()


def build_registry() -> CountryRegistry:
    """
    Build a registry from configuration and command line overrides.

    Raises:
        typer.Exit: If configuration or the dataset is invalid
    """
    setup_logging(state.verbose)
    try:
        config = Config()
        if config.dataset.log_level != "INFO":
            setup_logging(state.verbose, config.dataset.log_level)
        dataset = config.dataset
        if state.data_file:
            try:
                dataset = replace(dataset, data_file=state.data_file)
            except ValueError as e:
                raise ConfigurationError(f"Invalid --data-file: {e}") from e
        logger.debug(f"Configuration: {config!r}")
        logger.debug(f"Dataset file: {dataset.data_file}")
        return CountryRegistry(load_countries(dataset.data_file), duplicate_policy=dataset.duplicate_policy)
    except (ConfigurationError, DatasetError) as e:
        logger.error(str(e))
        raise typer.Exit(1) from e


def render_country(country: Country) -> None:
    """Print a country record field by field."""
    typer.echo(f"Common Name: {country.common_name}")
    typer.echo(f"Common Native Name: {country.common_native_name}")
    typer.echo(f"Official Name: {country.official_name}")
    typer.echo(f"Official Native Name: {country.official_native_name}")
    typer.echo(f"Numeric Code: {country.numeric_code}")
    typer.echo(f"Two Letter Code: {country.two_letter_code}")
    typer.echo(f"Three Letter Code: {country.three_letter_code}")
    typer.echo(f"Region: {country.region}")
    typer.echo(f"Subregion: {country.subregion}")
    typer.echo(f"Capital: {country.capital}")
    for code, name in country.languages.items():
        typer.echo(f"Language: {name} ({code})")
    for code, currency in country.currencies.items():
        typer.echo(f"Currency: {currency.name} ({code}, {currency.symbol})")
    typer.echo(f"Dialing Code: {country.dialing_code}")


def render_country_rows(countries: list[Country]) -> None:
    for country in countries:
        typer.echo(
            f"{country.two_letter_code}  {country.three_letter_code}  "
            f"{country.numeric_code}  {country.common_name}"
        )


@app.callback()
def main(
    data_file: Annotated[Optional[Path], typer.Option("--data-file", "-d", help="Path to an alternative YAML country dataset")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable detailed logging output")] = False,
):
    """
    Look up ISO 3166-1 countries by code and filter them by region.
    """
    state.data_file = data_file
    state.verbose = verbose


@app.command("lookup")
def lookup(
    code: Annotated[str, typer.Argument(help="Two-letter, three-letter or numeric country code (e.g. 'us', 'USA', '840')")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the record as JSON")] = False,
):
    """
    Show the country matching a code.

    Examples:
        worldcodes lookup us
        worldcodes lookup 840 --json
    """
    registry = build_registry()
    found, country = registry.try_get_country_by_code(code)

    if not found:
        typer.echo(f"ERROR: No country found for code '{code}'", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(country.model_dump_json(indent=2))
    else:
        render_country(country)


@app.command("region")
def region(
    name: Annotated[str, typer.Argument(help="Region name, e.g. 'Europe' (case-insensitive)")],
):
    """
    List countries in a region.

    Examples:
        worldcodes region europe
    """
    registry = build_registry()
    countries = registry.get_countries_by_region(name)

    if not countries:
        typer.echo(f"WARNING: No countries found in region '{name}'", err=True)
        typer.echo(f"Available regions: {', '.join(registry.list_regions())}", err=True)
        raise typer.Exit(1)

    render_country_rows(countries)
    typer.echo(f"\n{len(countries)} countries")


@app.command("subregion")
def subregion(
    name: Annotated[str, typer.Argument(help="Subregion name, e.g. 'Western Europe' (case-insensitive)")],
):
    """
    List countries in a subregion.

    Examples:
        worldcodes subregion "northern europe"
    """
    registry = build_registry()
    countries = registry.get_countries_by_subregion(name)

    if not countries:
        typer.echo(f"WARNING: No countries found in subregion '{name}'", err=True)
        raise typer.Exit(1)

    render_country_rows(countries)
    typer.echo(f"\n{len(countries)} countries")


@app.command("list-regions")
def list_regions(
    subregions: Annotated[bool, typer.Option("--subregions", help="List subregions instead of regions")] = False,
):
    """List the distinct regions (or subregions) in the dataset."""
    registry = build_registry()
    names = registry.list_subregions() if subregions else registry.list_regions()

    typer.echo("Available Subregions" if subregions else "Available Regions")
    typer.echo("=" * 50)
    for name in names:
        count = len(registry.get_countries_by_subregion(name) if subregions else registry.get_countries_by_region(name))
        typer.echo(f"* {name} ({count})")


@app.command("version")
def version():
    """Display version information."""
    from . import __version__
    typer.echo(f"worldcodes version: {__version__}")


if __name__ == "__main__":
    app()
