"""Adaptive curve model configuration and constants."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

from config.settings import Settings
from src.core.constants import SECONDS_PER_YEAR, WAD

# AdaptiveCurve parameters (annualized where time-dependent)
IRM_PARAMS: Dict[str, Decimal] = {
    # Target utilization (90%)
    "TARGET_UTILIZATION": Decimal("0.9"),
    # Rate multiplier at 100% utilization
    "CURVE_STEEPNESS": Decimal("4"),
    # Speed of adaptation (per year)
    "ADJUSTMENT_SPEED": Decimal("50"),
    # Initial rate at target
    "INITIAL_RATE_AT_TARGET": Decimal("0.04"),  # 4% APR
    # Min/Max rate bounds
    "MIN_RATE_AT_TARGET": Decimal("0.001"),  # 0.1% APR
    "MAX_RATE_AT_TARGET": Decimal("2.0"),  # 200% APR
}

# Fixed rate model upper bound (100x per second)
MAX_BORROW_RATE = 100 * WAD

# Events kept in memory per rate model
EVENT_HISTORY = 1000


def to_wad(value: Decimal) -> int:
    """Scale a decimal fraction to a WAD integer."""
    return int(value * WAD)


def to_per_second(annual: Decimal) -> int:
    """Convert an annual fraction to a per-second WAD rate, truncated."""
    return to_wad(annual) // SECONDS_PER_YEAR


@dataclass(frozen=True)
class CurveParams:
    """Integer parameters of the adaptive curve, per-second where time-dependent."""

    target_utilization: int
    curve_steepness: int
    adjustment_speed: int
    initial_rate_at_target: int
    min_rate_at_target: int
    max_rate_at_target: int

    def __post_init__(self):
        if not 0 < self.target_utilization < WAD:
            raise ValueError(f"Invalid target utilization: {self.target_utilization}")
        if self.curve_steepness <= WAD:
            raise ValueError(f"Curve steepness must exceed 1: {self.curve_steepness}")
        if not self.min_rate_at_target <= self.initial_rate_at_target <= self.max_rate_at_target:
            raise ValueError(
                f"Initial rate at target {self.initial_rate_at_target} outside "
                f"[{self.min_rate_at_target}, {self.max_rate_at_target}]"
            )

    @classmethod
    def from_annual(
        cls,
        target_utilization: Decimal,
        curve_steepness: Decimal,
        adjustment_speed: Decimal,
        initial_rate_at_target: Decimal,
        min_rate_at_target: Decimal,
        max_rate_at_target: Decimal,
    ) -> "CurveParams":
        """Build integer parameters from annualized decimal values."""
        return cls(
            target_utilization=to_wad(target_utilization),
            curve_steepness=to_wad(curve_steepness),
            adjustment_speed=to_per_second(adjustment_speed),
            initial_rate_at_target=to_per_second(initial_rate_at_target),
            min_rate_at_target=to_per_second(min_rate_at_target),
            max_rate_at_target=to_per_second(max_rate_at_target),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CurveParams":
        """Build integer parameters from application settings."""
        return cls.from_annual(
            target_utilization=settings.target_utilization,
            curve_steepness=settings.curve_steepness,
            adjustment_speed=settings.adjustment_speed,
            initial_rate_at_target=settings.initial_rate_at_target,
            min_rate_at_target=settings.min_rate_at_target,
            max_rate_at_target=settings.max_rate_at_target,
        )


DEFAULT_CURVE_PARAMS = CurveParams.from_annual(
    target_utilization=IRM_PARAMS["TARGET_UTILIZATION"],
    curve_steepness=IRM_PARAMS["CURVE_STEEPNESS"],
    adjustment_speed=IRM_PARAMS["ADJUSTMENT_SPEED"],
    initial_rate_at_target=IRM_PARAMS["INITIAL_RATE_AT_TARGET"],
    min_rate_at_target=IRM_PARAMS["MIN_RATE_AT_TARGET"],
    max_rate_at_target=IRM_PARAMS["MAX_RATE_AT_TARGET"],
)
