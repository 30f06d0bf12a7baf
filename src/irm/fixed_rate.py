"""Constant borrow rate model, settable once by its admin."""

import logging
from collections import deque
from typing import Callable, Deque, Optional

from config.settings import Settings, get_settings
from src.core.exceptions import InvalidRateError, NotAuthorizedError, RateAlreadySetError
from src.core.models import MarketParams, MarketState, RateSet
from src.irm.base import InterestRateModel, RateModelType
from src.irm.config import EVENT_HISTORY, MAX_BORROW_RATE, to_per_second

logger = logging.getLogger(__name__)


class FixedRate(InterestRateModel):
    """Returns the same per-second rate for every market and every state."""

    def __init__(
        self,
        admin: str,
        rate: int,
        rate_updated: bool = False,
        event_sink: Optional[Callable[[RateSet], None]] = None,
        event_history: int = EVENT_HISTORY,
    ):
        self.admin = admin
        self.rate = rate
        self.rate_updated = rate_updated
        self._event_sink = event_sink
        self.events: Deque[RateSet] = deque(maxlen=event_history)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        event_sink: Optional[Callable[[RateSet], None]] = None,
    ) -> "FixedRate":
        """Build a fixed rate model from application settings."""
        settings = settings or get_settings()
        return cls(
            admin=settings.fixed_rate_admin,
            rate=to_per_second(settings.fixed_initial_rate),
            event_sink=event_sink,
        )

    @property
    def model_type(self) -> RateModelType:
        return RateModelType.FIXED

    def get_rate(self) -> int:
        return self.rate

    def quote(self, params: MarketParams, state: MarketState) -> int:
        return self.rate

    def update(self, params: MarketParams, state: MarketState, caller: str) -> int:
        return self.rate

    def set_borrow_rate(self, new_rate: int, caller: str) -> None:
        """
        Replace the rate. Allowed once, by the admin only.

        Args:
            new_rate: Per-second WAD rate, at most MAX_BORROW_RATE
            caller: Identity of the invoking party

        Raises:
            NotAuthorizedError: If caller is not the admin
            RateAlreadySetError: If the rate was already set
            InvalidRateError: If new_rate exceeds MAX_BORROW_RATE
        """
        if caller != self.admin:
            logger.warning(f"Rejected fixed rate change from {caller}")
            raise NotAuthorizedError(caller, self.admin)
        if self.rate_updated:
            raise RateAlreadySetError("Fixed rate has already been set")
        if not 0 <= new_rate <= MAX_BORROW_RATE:
            raise InvalidRateError(f"Rate {new_rate} outside [0, {MAX_BORROW_RATE}]")

        old_rate = self.rate
        event = RateSet(setter=caller, old_rate=old_rate, new_rate=new_rate)
        if self._event_sink is not None:
            self._event_sink(event)

        self.rate = new_rate
        self.rate_updated = True
        self.events.append(event)

        logger.info(f"Fixed rate set by {caller}: {old_rate} -> {new_rate}")
