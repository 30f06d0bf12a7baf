"""Base interest rate model interface.

Defines the interface every rate model exposes to the lending protocol,
so markets can be configured with any model.
"""

from abc import ABC, abstractmethod
from enum import Enum

from src.core.models import MarketParams, MarketState


class RateModelType(Enum):
    """Supported interest rate model types."""

    DYNAMIC = "dynamic"
    FIXED = "fixed"


class InterestRateModel(ABC):
    """Abstract base class for interest rate models."""

    @property
    @abstractmethod
    def model_type(self) -> RateModelType:
        """Return the type of this model."""
        ...

    @abstractmethod
    def quote(self, params: MarketParams, state: MarketState) -> int:
        """Per-second WAD borrow rate for a market, without changing any state.

        Args:
            params: Market parameters
            state: Current market totals

        Returns:
            Per-second WAD borrow rate
        """
        ...

    @abstractmethod
    def update(self, params: MarketParams, state: MarketState, caller: str) -> int:
        """Per-second WAD borrow rate for a market, persisting any model state.

        Args:
            params: Market parameters
            state: Current market totals
            caller: Identity of the invoking party

        Returns:
            Per-second WAD borrow rate
        """
        ...
