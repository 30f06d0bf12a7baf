"""Rate at target storage backends."""

from src.data.storage.rate_store import RateAtTargetStore, InMemoryRateStore, DiskRateStore

__all__ = [
    "RateAtTargetStore",
    "InMemoryRateStore",
    "DiskRateStore",
]
