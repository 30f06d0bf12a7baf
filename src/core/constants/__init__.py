"""Core constants module.

Re-exports all constants for convenience.
"""

from src.core.constants.generic import (
    SECONDS_PER_YEAR,
    SECONDS_PER_DAY,
    WAD,
)

__all__ = [
    "SECONDS_PER_YEAR",
    "SECONDS_PER_DAY",
    "WAD",
]
