"""
Domain Models and Types

Core models and enumerations for the country reference data.

Models:
- Country: ISO 3166-1 record with names, codes, region and reference metadata
- Currency: Currency name and symbol

Enums:
- DuplicatePolicy: Handling of duplicate codes during index construction
- CodeType: Code families indexed by the registry
"""

from .enums import CodeType, DuplicatePolicy
from .models import Country, Currency

__all__ = [
    "Country", "Currency",
    "CodeType", "DuplicatePolicy"
]
