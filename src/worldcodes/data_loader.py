"""
Country dataset loading.

Reads the YAML country dataset (bundled at worldcodes/data/countries.yml by
default) and validates each entry into an immutable Country model. The order
of entries in the file is the dataset order seen by every filter.

Expected layout:

    countries:
      - common_name: "United States"
        numeric_code: "840"
        two_letter_code: "US"
        three_letter_code: "USA"
        currencies:
          USD: {name: "United States dollar", symbol: "$"}
        ...
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from .domain.models import Country
from .types import DatasetFormatError, DatasetNotFoundError
from .utils import timer

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).resolve().parent / "data" / "countries.yml"


@timer
def load_countries(path: Optional[Union[str, Path]] = None) -> tuple[Country, ...]:
    """
    Load and validate the country dataset.

    Args:
        path: YAML dataset path (defaults to the bundled dataset)

    Returns:
        Tuple of Country records in file order

    Raises:
        DatasetNotFoundError: If the file does not exist
        DatasetFormatError: If the file is not valid YAML or a record is invalid
    """
    data_path = Path(path) if path is not None else DEFAULT_DATA_FILE

    if not data_path.exists():
        raise DatasetNotFoundError(data_path)

    with open(data_path, encoding='utf-8') as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise DatasetFormatError(data_path, f"YAML parse error: {e}") from e

    countries = parse_countries(raw, source=data_path)
    logger.debug(f"Loaded {len(countries)} countries from {data_path}")
    return countries


def parse_countries(raw: Any, source: Union[str, Path] = "<data>") -> tuple[Country, ...]:
    """
    Validate already-parsed dataset content into Country records.

    Accepts either a mapping with a 'countries' list or the list itself.
    """
    if isinstance(raw, dict):
        if 'countries' not in raw:
            raise DatasetFormatError(source, "missing top-level 'countries' key")
        entries = raw['countries']
    else:
        entries = raw

    if not isinstance(entries, list):
        raise DatasetFormatError(source, "'countries' must be a list of records")

    countries = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise DatasetFormatError(source, "record must be a mapping", index=index)
        try:
            countries.append(Country(**entry))
        except ValidationError as e:
            name = entry.get('common_name', '?')
            raise DatasetFormatError(source, f"{name}: {e}", index=index) from e

    return tuple(countries)
