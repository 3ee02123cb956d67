"""
Configuration module for the country reference registry.
"""

from .countries import CountryRegistry, get_registry, reset_registry
from .settings import (
    Config,
    ConfigurationError,
    DatasetConfig,
)

__all__ = [
    'Config',
    'ConfigurationError',
    'DatasetConfig',
    'CountryRegistry',
    'get_registry',
    'reset_registry'
]
