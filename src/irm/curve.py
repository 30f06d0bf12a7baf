"""AdaptiveCurve rate calculations."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from src.core.constants import SECONDS_PER_YEAR, WAD
from src.irm.config import DEFAULT_CURVE_PARAMS, CurveParams
from src.irm.fixed_point import clamp, compounded_growth, div_fixed, mul_fixed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveResult:
    """Outcome of one curve evaluation over an interval."""

    avg_rate: int  # Per-second WAD rate attributed to the interval
    rate_at_target: int  # Rate at target at the end of the interval


class AdaptiveCurve:
    """
    Adaptive curve interest rate model.

    The borrow rate is the rate at target scaled by a piecewise-linear
    multiplier of the utilization error: 1/steepness at zero utilization,
    1 at target and steepness at full utilization. The rate at target itself
    drifts exponentially toward whatever level brings utilization back to
    target, at a speed proportional to the error.

    All rates are per-second WAD integers.
    """

    def __init__(self, params: CurveParams = DEFAULT_CURVE_PARAMS):
        self.params = params

    def error(self, utilization: int) -> int:
        """
        Normalized distance from target utilization.

        -1 at zero utilization, 0 at target, +1 at full utilization.
        """
        target = self.params.target_utilization
        if utilization < target:
            return div_fixed(utilization - target, target)
        return div_fixed(utilization - target, WAD - target)

    def apply_curve(self, rate_at_target: int, err: int) -> int:
        """Instantaneous rate implied by the error for a given rate at target."""
        if err < 0:
            coeff = WAD - div_fixed(WAD, self.params.curve_steepness)
        else:
            coeff = self.params.curve_steepness - WAD
        return mul_fixed(mul_fixed(coeff, err) + WAD, rate_at_target)

    def new_rate_at_target(self, start_rate_at_target: int, err: int, elapsed: int) -> int:
        """
        Rate at target after adapting for elapsed seconds at a constant error.

        Unchanged when either the error or the elapsed time is zero.
        """
        if elapsed == 0 or err == 0:
            return start_rate_at_target

        speed = mul_fixed(self.params.adjustment_speed, err)
        growth = compounded_growth(speed, elapsed)
        rate = mul_fixed(start_rate_at_target, WAD + growth)

        return clamp(rate, self.params.min_rate_at_target, self.params.max_rate_at_target)

    def borrow_rate(
        self,
        utilization: int,
        elapsed: int,
        rate_at_target: Optional[int] = None,
    ) -> CurveResult:
        """
        Evaluate the curve over an interval.

        Args:
            utilization: WAD utilization during the interval
            elapsed: Seconds since the market was last updated
            rate_at_target: Rate at target at the start of the interval,
                None if the market has never been touched

        Returns:
            CurveResult with the average rate and the new rate at target
        """
        err = self.error(utilization)

        if rate_at_target is None:
            # First interaction: no adaptation, no averaging
            initial = self.params.initial_rate_at_target
            return CurveResult(avg_rate=self.apply_curve(initial, err), rate_at_target=initial)

        end_rate_at_target = self.new_rate_at_target(rate_at_target, err, elapsed)
        start_rate = self.apply_curve(rate_at_target, err)

        if end_rate_at_target == rate_at_target:
            avg_rate = start_rate
        else:
            # Trapezoid over the interval instead of sampling the endpoint
            avg_rate = (start_rate + self.apply_curve(end_rate_at_target, err)) // 2

        logger.debug(
            f"Curve: utilization={utilization} err={err} elapsed={elapsed} "
            f"rate_at_target={rate_at_target}->{end_rate_at_target} avg_rate={avg_rate}"
        )
        return CurveResult(avg_rate=avg_rate, rate_at_target=end_rate_at_target)

    def generate_rate_curve(
        self,
        rate_at_target: Optional[int] = None,
        num_points: int = 100,
    ) -> Tuple[List[float], List[float]]:
        """
        Generate the instantaneous rate curve for visualization.

        Args:
            rate_at_target: Rate at target (default: initial rate at target)
            num_points: Number of intervals between 0% and 100% utilization

        Returns:
            Tuple of (utilizations, annualized borrow rates) as float lists
        """
        if rate_at_target is None:
            rate_at_target = self.params.initial_rate_at_target

        utilizations = []
        borrow_rates = []

        for i in range(num_points + 1):
            util = WAD * i // num_points
            rate = self.apply_curve(rate_at_target, self.error(util))

            utilizations.append(util / WAD)
            borrow_rates.append(float(self.annualize(rate)))

        return utilizations, borrow_rates

    @staticmethod
    def annualize(rate: int) -> Decimal:
        """
        Convert a per-second WAD rate to an annual fraction (APR).

        Args:
            rate: Per-second WAD rate

        Returns:
            Annual Percentage Rate as a fraction
        """
        return Decimal(rate * SECONDS_PER_YEAR) / Decimal(WAD)

    @staticmethod
    def apr_to_apy(apr: Decimal, compounding_periods: int = 365) -> Decimal:
        """
        Convert APR to APY with given compounding periods.

        APY = (1 + APR/n)^n - 1

        Args:
            apr: Annual Percentage Rate
            compounding_periods: Number of compounding periods per year

        Returns:
            Annual Percentage Yield
        """
        if apr <= Decimal("0"):
            return Decimal("0")

        rate_per_period = apr / Decimal(str(compounding_periods))
        return (Decimal("1") + rate_per_period) ** compounding_periods - Decimal("1")
