"""
worldcodes: ISO 3166-1 country reference data.

    >>> from worldcodes import get_country_by_code
    >>> get_country_by_code("us").common_name
    'United States'
"""

__version__ = "1.0.0"

from .config.countries import (
    CountryRegistry,
    get_countries_by_region,
    get_countries_by_subregion,
    get_country_by_code,
    get_registry,
    reset_registry,
    try_get_country_by_code,
)
from .config.settings import Config, ConfigurationError
from .data_loader import load_countries
from .domain import CodeType, Country, Currency, DuplicatePolicy
from .types import DatasetError, DatasetFormatError, DatasetNotFoundError, DuplicateCodeError

__all__ = [
    "__version__",
    "get_country_by_code", "try_get_country_by_code",
    "get_countries_by_region", "get_countries_by_subregion",
    "CountryRegistry", "get_registry", "reset_registry", "load_countries",
    "Country", "Currency", "CodeType", "DuplicatePolicy",
    "Config", "ConfigurationError",
    "DatasetError", "DatasetFormatError", "DatasetNotFoundError", "DuplicateCodeError",
]
