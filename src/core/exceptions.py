"""Exceptions raised by interest rate models."""


class RateModelError(Exception):
    """Base class for interest rate model failures."""


class NotAuthorizedError(RateModelError):
    """Raised when a caller is not the recorded controller or admin."""

    def __init__(self, caller: str, expected: str):
        self.caller = caller
        self.expected = expected
        super().__init__(f"Caller {caller} is not authorized (expected {expected})")


class RateAlreadySetError(RateModelError):
    """Raised when a one-time-settable rate has already been set."""


class InvalidRateError(RateModelError, ValueError):
    """Raised when a requested rate is outside the accepted range."""
