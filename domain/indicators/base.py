"""Base types and errors for technical indicators."""

import math
import operator
from typing import NamedTuple, Sequence


class OHLCSample(NamedTuple):
    """One trading session as consumed by the stochastic oscillator.

    Attributes:
        close: Closing price
        low: Session low
        high: Session high

    Example:
        >>> sample = OHLCSample(close=15.0, low=10.0, high=20.0)
        >>> close, low, high = sample
    """
    close: float
    low: float
    high: float


class IndicatorError(Exception):
    """Base class for indicator failures."""


class InsufficientDataError(IndicatorError):
    """Raised when a series is too short to produce a single value."""

    def __init__(self, received: int, required: int, indicator: str = "indicator"):
        self.received = received
        self.required = required
        self.indicator = indicator
        super().__init__(
            f"Not enough entries to calculate {indicator}. "
            f"Received {received}, but required {required}."
        )


class DegenerateWindowError(IndicatorError):
    """Raised in strict mode when a ratio has a zero denominator."""

    def __init__(self, index: int, indicator: str = "indicator"):
        self.index = index
        self.indicator = indicator
        super().__init__(f"Degenerate window in {indicator} at output index {index}")


def validate_period(period: int) -> int:
    """Return period as a plain int, rejecting bools, non-integers and values < 1."""
    if isinstance(period, bool):
        raise ValueError(f"period must be a positive integer, got {period!r}")
    try:
        value = operator.index(period)
    except TypeError:
        raise ValueError(f"period must be a positive integer, got {period!r}") from None
    if value < 1:
        raise ValueError(f"period must be a positive integer, got {period!r}")
    return value


def require_length(values: Sequence, required: int, indicator: str) -> None:
    """Raise InsufficientDataError if values has fewer than required entries."""
    if len(values) < required:
        raise InsufficientDataError(len(values), required, indicator)


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE 754 semantics instead of raising ZeroDivisionError.

    x / 0 gives +/-inf for non-zero x and nan for 0 / 0.

    Example:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
