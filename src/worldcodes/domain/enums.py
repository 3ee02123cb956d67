"""
Registry Enumerations

Enums shared by the registry, configuration and CLI.
"""

from enum import Enum


class DuplicatePolicy(str, Enum):
    """How index construction treats a code that appears on more than one record."""
    OVERWRITE = "overwrite" # Last record wins, logged as a warning
    ERROR = "error"         # Fail construction with DuplicateCodeError

    @classmethod
    def _missing_(cls, value):
        # Accept any case, e.g. "ERROR" from an environment variable
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class CodeType(str, Enum):
    """ISO 3166-1 code families indexed by the registry."""
    NUMERIC = "numeric"         # 3 digits, e.g. 840
    TWO_LETTER = "two_letter"   # alpha-2, e.g. US
    THREE_LETTER = "three_letter" # alpha-3, e.g. USA
