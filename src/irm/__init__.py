"""Interest rate models.

Fixed-point math: src.irm.fixed_point
Market ids: src.irm.market_id
Curve engine: src.irm.curve
Rate models: src.irm.dynamic_rate, src.irm.fixed_rate
"""

from .config import IRM_PARAMS, MAX_BORROW_RATE, EVENT_HISTORY, CurveParams, DEFAULT_CURVE_PARAMS
from .curve import AdaptiveCurve, CurveResult
from .market_id import compute_market_id
from .base import InterestRateModel, RateModelType
from .dynamic_rate import DynamicRate
from .fixed_rate import FixedRate

__all__ = [
    "IRM_PARAMS",
    "MAX_BORROW_RATE",
    "EVENT_HISTORY",
    "CurveParams",
    "DEFAULT_CURVE_PARAMS",
    "AdaptiveCurve",
    "CurveResult",
    "compute_market_id",
    "InterestRateModel",
    "RateModelType",
    "DynamicRate",
    "FixedRate",
]
