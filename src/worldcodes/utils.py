"""
Consolidated Utilities

Sections:
- Logging and timing utilities
- String normalization helpers
"""

import functools
import logging
import string
import sys
import time
from collections.abc import Callable
from typing import Optional

# =============================================================================
# Logging and Timing Utilities
# =============================================================================

def setup_logging(verbose: bool, level: Optional[str] = None) -> None:
    """
    Configure console logging for command line use.

    Args:
        verbose: Enable debug-level logging if True
        level: Level name used when not verbose (defaults to INFO)
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName((level or "INFO").upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )


def timer(func: Callable) -> Callable:
    """Decorator to time function execution."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        end_time = time.time()
        logging.getLogger(func.__module__).debug(
            f"{func.__name__} completed in {end_time - start_time:.3f} seconds"
        )
        return result
    return wrapper


# =============================================================================
# String Normalization
# =============================================================================

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def fold_ascii(value: str) -> str:
    """
    Uppercase ASCII letters only.

    Ordinal case-insensitive comparisons go through this instead of str.upper(),
    which applies Unicode case mapping ("ß" -> "SS").
    """
    return value.translate(_ASCII_UPPER)
