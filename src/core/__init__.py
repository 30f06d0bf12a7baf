"""Core module - models, constants and exceptions."""

from .models import MarketParams, MarketState, BorrowRateUpdate, RateSet
from .constants import SECONDS_PER_YEAR, SECONDS_PER_DAY, WAD
from .exceptions import (
    RateModelError,
    NotAuthorizedError,
    RateAlreadySetError,
    InvalidRateError,
)

__all__ = [
    "MarketParams",
    "MarketState",
    "BorrowRateUpdate",
    "RateSet",
    "SECONDS_PER_YEAR",
    "SECONDS_PER_DAY",
    "WAD",
    "RateModelError",
    "NotAuthorizedError",
    "RateAlreadySetError",
    "InvalidRateError",
]
