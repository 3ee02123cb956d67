"""
Country Registry

Indexed, read-only view over the ISO 3166-1 country dataset. A registry builds
its numeric, alpha-2 and alpha-3 indices once at construction and is never
mutated afterwards, so a single instance can be shared across threads.

The process-wide registry is created lazily from Config by get_registry();
tests and embedding applications can construct their own registry from any
sequence of Country records.
"""

import logging
import threading
from collections.abc import Iterable, Iterator
from typing import Optional

from ..data_loader import load_countries
from ..domain.enums import CodeType, DuplicatePolicy
from ..domain.models import Country
from ..types import DuplicateCodeError
from ..utils import fold_ascii
from .settings import Config

logger = logging.getLogger(__name__)


class CountryRegistry:
    """Registry for country lookups by code and filtering by region"""

    def __init__(self,
                 countries: Iterable[Country],
                 duplicate_policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE):
        """
        Build code indices over the given records.

        Args:
            countries: Country records in dataset order
            duplicate_policy: Keep the last record (with a warning) or raise on duplicate codes

        Raises:
            DuplicateCodeError: If a code repeats and duplicate_policy is ERROR
        """
        self._countries: tuple[Country, ...] = tuple(countries)
        self._duplicate_policy = DuplicatePolicy(duplicate_policy)

        self._numeric_index: dict[str, Country] = {}
        self._two_letter_index: dict[str, Country] = {}
        self._three_letter_index: dict[str, Country] = {}

        for country in self._countries:
            self._index(self._numeric_index, CodeType.NUMERIC, country.numeric_code, country)
            self._index(self._two_letter_index, CodeType.TWO_LETTER, country.two_letter_code, country)
            self._index(self._three_letter_index, CodeType.THREE_LETTER, country.three_letter_code, country)

        logger.debug(
            f"Indexed {len(self._countries)} countries "
            f"({len(self._two_letter_index)} alpha-2, "
            f"{len(self._three_letter_index)} alpha-3, "
            f"{len(self._numeric_index)} numeric)"
        )

    def _index(self, index: dict[str, Country], code_type: CodeType, code: str, country: Country) -> None:
        key = fold_ascii(code)
        existing = index.get(key)

        if existing is not None:
            if self._duplicate_policy is DuplicatePolicy.ERROR:
                raise DuplicateCodeError(code_type, code, existing.common_name, country.common_name)
            logger.warning(
                f"Duplicate {code_type.value} code '{code}': "
                f"'{country.common_name}' replaces '{existing.common_name}'"
            )

        index[key] = country

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "CountryRegistry":
        """Load the configured dataset and build a registry over it."""
        config = config or Config()
        countries = load_countries(config.dataset.data_file)
        return cls(countries, duplicate_policy=config.dataset.duplicate_policy)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_country_by_code(self, code: str) -> Optional[Country]:
        """
        Get country information by numeric, alpha-2 or alpha-3 code.

        Two-character input is only matched against alpha-2 codes. Three-character
        input is tried as alpha-3 first, then as numeric. Any other length has no
        match. Matching ignores ASCII case.

        Args:
            code: Country code such as 'US', 'usa' or '840'

        Returns:
            Country if found, None otherwise
        """
        key = fold_ascii(code)

        if len(key) == 2:
            country = self._two_letter_index.get(key)
            if country is not None:
                return country

        if len(key) != 3:
            return None

        country = self._three_letter_index.get(key)
        if country is not None:
            return country

        return self._numeric_index.get(key)

    def try_get_country_by_code(self, code: str) -> tuple[bool, Optional[Country]]:
        """Same as get_country_by_code, returning (found, country)."""
        country = self.get_country_by_code(code)
        return country is not None, country

    def is_valid_code(self, code: str) -> bool:
        """Check if a country code resolves to a record"""
        return self.get_country_by_code(code) is not None

    # -------------------------------------------------------------------------
    # Filters
    # -------------------------------------------------------------------------

    def get_countries_by_region(self, region: str) -> list[Country]:
        """Get all countries in a region (case-insensitive exact match), in dataset order"""
        wanted = fold_ascii(region)
        return [country for country in self._countries
                if fold_ascii(country.region) == wanted]

    def get_countries_by_subregion(self, subregion: str) -> list[Country]:
        """Get all countries in a subregion (case-insensitive exact match), in dataset order"""
        wanted = fold_ascii(subregion)
        return [country for country in self._countries
                if fold_ascii(country.subregion) == wanted]

    def list_countries(self) -> list[Country]:
        """Get list of all countries in dataset order"""
        return list(self._countries)

    def list_regions(self) -> list[str]:
        """Get sorted list of distinct regions"""
        return sorted({country.region for country in self._countries if country.region})

    def list_subregions(self) -> list[str]:
        """Get sorted list of distinct subregions"""
        return sorted({country.subregion for country in self._countries if country.subregion})

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return self._duplicate_policy

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[Country]:
        return iter(self._countries)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.is_valid_code(code)

    def __repr__(self) -> str:
        return f"CountryRegistry(countries={len(self._countries)}, duplicate_policy={self._duplicate_policy.value})"


# =============================================================================
# Shared registry
# =============================================================================

_registry: Optional[CountryRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> CountryRegistry:
    """
    Get the process-wide registry, building it from Config on first use.

    Construction runs at most once; concurrent first callers block until the
    registry is complete and then share it.
    """
    global _registry

    registry = _registry
    if registry is not None:
        return registry

    with _registry_lock:
        if _registry is None:
            _registry = CountryRegistry.from_config()
            logger.debug(f"Shared registry ready: {_registry!r}")
        return _registry


def reset_registry() -> None:
    """Drop the shared registry so the next get_registry() rebuilds it."""
    global _registry
    with _registry_lock:
        _registry = None


def get_country_by_code(code: str) -> Optional[Country]:
    """Look up a code in the shared registry."""
    return get_registry().get_country_by_code(code)


def try_get_country_by_code(code: str) -> tuple[bool, Optional[Country]]:
    """Look up a code in the shared registry, returning (found, country)."""
    return get_registry().try_get_country_by_code(code)


def get_countries_by_region(region: str) -> list[Country]:
    """Filter the shared registry by region."""
    return get_registry().get_countries_by_region(region)


def get_countries_by_subregion(subregion: str) -> list[Country]:
    """Filter the shared registry by subregion."""
    return get_registry().get_countries_by_subregion(subregion)
