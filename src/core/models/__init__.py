"""Core data models for the interest rate engine."""

from .market import MarketParams, MarketState, contract_id_bytes
from .events import BorrowRateUpdate, RateSet

__all__ = [
    "MarketParams",
    "MarketState",
    "contract_id_bytes",
    "BorrowRateUpdate",
    "RateSet",
]
