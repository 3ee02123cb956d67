"""
Country Domain Models

Pydantic models for the country reference records. Instances are immutable,
including their language and currency mappings, and are shared read-only by
every registry that indexes them.
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field, field_serializer, field_validator


class Currency(BaseModel):
    """Currency used in a country."""
    name: str = Field(..., description="Currency display name")
    symbol: str = Field(default="", description="Currency symbol")

    class Config:
        """Pydantic configuration."""
        frozen = True
        extra = "forbid"


class Country(BaseModel):
    """ISO 3166-1 country record with names, codes and reference metadata."""
    common_name: str = Field(..., description="Common English name")
    common_native_name: str = Field(..., description="Common name in a native language")
    official_name: str = Field(..., description="Official English name")
    official_native_name: str = Field(..., description="Official name in a native language")

    numeric_code: str = Field(..., pattern=r"^[0-9]{3}$", description="ISO 3166-1 numeric code")
    two_letter_code: str = Field(..., pattern=r"^[A-Za-z]{2}$", description="ISO 3166-1 alpha-2 code")
    three_letter_code: str = Field(..., pattern=r"^[A-Za-z]{3}$", description="ISO 3166-1 alpha-3 code")

    region: str = Field(..., description="Geographic region")
    subregion: str = Field(default="", description="Geographic subregion")
    capital: str = Field(default="", description="Capital city")

    languages: Mapping[str, str] = Field(default_factory=dict, validate_default=True, description="Language code to language name")
    currencies: Mapping[str, Currency] = Field(default_factory=dict, validate_default=True, description="Currency code to currency")
    dialing_code: str = Field(..., description="International dialing code, e.g. +1")

    class Config:
        """Pydantic configuration."""
        frozen = True  # Records are shared across registries
        extra = "forbid"  # Misspelled keys fail dataset loading

    @field_validator('languages', 'currencies')
    @classmethod
    def freeze_mapping(cls, v):
        return MappingProxyType(dict(v))

    @field_serializer('languages')
    def serialize_languages(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)

    @field_serializer('currencies')
    def serialize_currencies(self, v: Mapping[str, Currency]) -> dict[str, dict[str, str]]:
        return {code: currency.model_dump() for code, currency in v.items()}

    @property
    def codes(self) -> tuple[str, str, str]:
        """(numeric, alpha-2, alpha-3) code triple identifying the record."""
        return (self.numeric_code, self.two_letter_code, self.three_letter_code)

    def __hash__(self) -> int:
        # languages/currencies are mappings, so hash on identity codes only
        return hash(self.codes)
