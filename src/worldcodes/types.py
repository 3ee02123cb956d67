"""
Exception types for dataset loading and index construction.

Not-found lookups are never errors: they return None or an empty list. These
exceptions cover a dataset that cannot be read or indexed at all.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

from .domain.enums import CodeType


class DatasetError(Exception):
    """Base exception for country dataset problems."""
    pass


class DatasetNotFoundError(DatasetError):
    """Dataset file does not exist."""
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Country dataset not found: {self.path}")


class DatasetFormatError(DatasetError):
    """Dataset file is not valid YAML, has the wrong shape, or holds an invalid record."""
    def __init__(self, source: Union[str, Path], message: str, index: Optional[int] = None):
        self.source = str(source)
        self.index = index
        location = f"{self.source} (entry {index})" if index is not None else self.source
        super().__init__(f"Invalid country dataset {location}: {message}")


class DuplicateCodeError(DatasetError):
    """Two records share a code and the registry was asked to fail fast."""
    def __init__(self, code_type: CodeType, code: str, existing: str, duplicate: str):
        self.code_type = code_type
        self.code = code
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            f"Duplicate {code_type.value} code '{code}': "
            f"'{duplicate}' conflicts with '{existing}'"
        )
