"""Adaptive borrow rate service with per-market state."""

import logging
import time
from collections import deque
from typing import Callable, Deque, Optional

from config.settings import Settings, get_settings
from src.core.exceptions import NotAuthorizedError
from src.core.models import BorrowRateUpdate, MarketParams, MarketState
from src.data.storage import DiskRateStore, InMemoryRateStore, RateAtTargetStore
from src.irm.base import InterestRateModel, RateModelType
from src.irm.config import DEFAULT_CURVE_PARAMS, EVENT_HISTORY, CurveParams
from src.irm.curve import AdaptiveCurve, CurveResult
from src.irm.market_id import compute_market_id

logger = logging.getLogger(__name__)


def _wall_clock() -> int:
    return int(time.time())


class DynamicRate(InterestRateModel):
    """Adaptive curve rate model holding one rate at target per market.

    Quotes are read-only. Updates are restricted to the controller, persist
    the new rate at target and emit a BorrowRateUpdate. The host must not
    run two updates for the same market concurrently.
    """

    def __init__(
        self,
        controller: str,
        params: CurveParams = DEFAULT_CURVE_PARAMS,
        store: Optional[RateAtTargetStore] = None,
        clock: Optional[Callable[[], int]] = None,
        event_sink: Optional[Callable[[BorrowRateUpdate], None]] = None,
        event_history: int = EVENT_HISTORY,
    ):
        """Initialize the rate model.

        Args:
            controller: Only identity allowed to call update()
            params: Curve parameters
            store: Rate at target store (default: in-memory)
            clock: Returns the current Unix time in seconds
            event_sink: Receives every emitted BorrowRateUpdate
            event_history: Number of recent events kept in self.events
        """
        self.controller = controller
        self.curve = AdaptiveCurve(params)
        self.store = store if store is not None else InMemoryRateStore()
        self._clock = clock or _wall_clock
        self._event_sink = event_sink
        # Recent events only; the sink receives the full stream.
        self.events: Deque[BorrowRateUpdate] = deque(maxlen=event_history)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], int]] = None,
        event_sink: Optional[Callable[[BorrowRateUpdate], None]] = None,
    ) -> "DynamicRate":
        """Build a rate model from application settings."""
        settings = settings or get_settings()

        if settings.store_backend == "disk":
            store: RateAtTargetStore = DiskRateStore(settings)
        else:
            store = InMemoryRateStore()

        return cls(
            controller=settings.controller_address,
            params=CurveParams.from_settings(settings),
            store=store,
            clock=clock,
            event_sink=event_sink,
        )

    @property
    def model_type(self) -> RateModelType:
        return RateModelType.DYNAMIC

    @property
    def params(self) -> CurveParams:
        return self.curve.params

    def compute_market_id(self, params: MarketParams) -> str:
        """Storage key of a market."""
        return compute_market_id(params)

    def rate_at_target(self, params: MarketParams) -> Optional[int]:
        """Persisted rate at target of a market, None before its first update."""
        return self.store.get(compute_market_id(params))

    def init_interest(self, params: MarketParams, state: MarketState) -> bool:
        """
        Create a market's rate at target entry with the initial rate.

        Args:
            params: Market parameters
            state: Current market totals

        Returns:
            True if the entry was created, False if the market already had one
        """
        market_id = compute_market_id(params)
        created = self.store.create(market_id, self.params.initial_rate_at_target)

        if created:
            logger.info(
                f"Initialized rate at target for market {market_id}: "
                f"{self.params.initial_rate_at_target} (last update {state.last_update})"
            )
        else:
            logger.debug(f"Market {market_id} already initialized, skipping")
        return created

    def quote(self, params: MarketParams, state: MarketState) -> int:
        """Average borrow rate since the last update, without persisting anything."""
        market_id = compute_market_id(params)
        return self._evaluate(market_id, state).avg_rate

    def update(self, params: MarketParams, state: MarketState, caller: str) -> int:
        """
        Average borrow rate since the last update, persisting the new rate at target.

        Args:
            params: Market parameters
            state: Current market totals
            caller: Identity of the invoking party

        Returns:
            Per-second WAD average borrow rate

        Raises:
            NotAuthorizedError: If caller is not the controller
        """
        if caller != self.controller:
            logger.warning(f"Rejected borrow rate update from {caller}")
            raise NotAuthorizedError(caller, self.controller)

        market_id = compute_market_id(params)
        result = self._evaluate(market_id, state)

        event = BorrowRateUpdate(
            market_id=market_id,
            avg_borrow_rate=result.avg_rate,
            rate_at_target=result.rate_at_target,
        )
        # A failing sink aborts the update before any state changes.
        if self._event_sink is not None:
            self._event_sink(event)

        if not self.store.create(market_id, result.rate_at_target):
            self.store.set(market_id, result.rate_at_target)
        self.events.append(event)

        logger.info(
            f"Updated market {market_id}: avg_borrow_rate={result.avg_rate} "
            f"rate_at_target={result.rate_at_target}"
        )
        return result.avg_rate

    def _elapsed(self, state: MarketState) -> int:
        """Seconds since the market's last update, never negative."""
        elapsed = self._clock() - state.last_update
        if elapsed < 0:
            logger.warning(
                f"Market last update {state.last_update} is in the future, using zero elapsed time"
            )
            return 0
        return elapsed

    def _evaluate(self, market_id: str, state: MarketState) -> CurveResult:
        return self.curve.borrow_rate(
            utilization=state.utilization,
            elapsed=self._elapsed(state),
            rate_at_target=self.store.get(market_id),
        )
