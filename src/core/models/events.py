"""Event records emitted by interest rate models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple


def _utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class BorrowRateUpdate:
    """Emitted each time a market's rate at target is persisted."""

    market_id: str
    avg_borrow_rate: int
    rate_at_target: int
    emitted_at: datetime = field(default_factory=_utcnow, compare=False)

    @property
    def fields(self) -> Tuple[Optional[int], int, int]:
        """
        Positional layout consumed by indexers.

        Index 0 is reserved and always None, index 1 is the average
        borrow rate and index 2 is the new rate at target.
        """
        return (None, self.avg_borrow_rate, self.rate_at_target)


@dataclass(frozen=True)
class RateSet:
    """Emitted when a fixed rate is set by its admin."""

    setter: str
    old_rate: int
    new_rate: int
    emitted_at: datetime = field(default_factory=_utcnow, compare=False)
