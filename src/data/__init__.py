"""Data layer for the interest rate engine."""

from .storage import RateAtTargetStore, InMemoryRateStore, DiskRateStore

__all__ = [
    "RateAtTargetStore",
    "InMemoryRateStore",
    "DiskRateStore",
]
