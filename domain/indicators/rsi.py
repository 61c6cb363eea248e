"""Relative Strength Index (RSI) indicator."""

import logging
from typing import Sequence

from domain.indicators.base import (
    DegenerateWindowError,
    ieee_divide,
    require_length,
    validate_period,
)

logger = logging.getLogger(__name__)


def _rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    rs = ieee_divide(avg_gain, avg_loss)
    return 100.0 - (100.0 / (1.0 + rs))


def rsi(prices: Sequence[float], period: int = 14, strict: bool = False) -> list[float]:
    """Calculate RSI using Wilder's smoothing method.

    The first value is the plain ratio of the simple average gain and loss
    over the first ``period`` price changes. Every later value updates both
    averages with Wilder's recurrence before taking the ratio again.

    Args:
        prices: Chronologically ordered prices
        period: RSI period (default: 14)
        strict: Raise DegenerateWindowError instead of emitting a non-finite
            or saturated value when the average loss is zero

    Returns:
        List of RSI values, one per price after the first ``period``.
        Length is ``len(prices) - period``.

    Raises:
        InsufficientDataError: If fewer than ``period + 1`` prices are given
        DegenerateWindowError: In strict mode, when the average loss is zero
        ValueError: If period is not a positive integer

    Example:
        >>> prices = [10, 12, 15, 13, 18, 10, 12, 15, 13, 18, 10, 12, 15, 13, 18, 10]
        >>> rsi(prices)
        [57.69..., 49.49...]

    Notes:
        - Wilder's smoothing: new avg = (prev_avg * (period - 1) + current) / period
        - A zero change decays both averages and adds nothing
        - Values are not clamped: an average loss of 0 yields 100.0, or nan
          when the average gain is 0 as well
    """
    period = validate_period(period)
    require_length(prices, period + 1, "the RSI")

    gain_sum = 0.0
    loss_sum = 0.0
    for i in range(1, period + 1):
        delta = prices[i] - prices[i - 1]
        if delta > 0:
            gain_sum += delta
        elif delta < 0:
            loss_sum -= delta

    avg_gain = gain_sum / period
    avg_loss = loss_sum / period

    if strict and avg_loss == 0:
        raise DegenerateWindowError(0, "the RSI")
    result = [_rsi_from_averages(avg_gain, avg_loss)]

    for i in range(period + 1, len(prices)):
        delta = prices[i] - prices[i - 1]
        avg_gain = avg_gain * (period - 1)
        avg_loss = avg_loss * (period - 1)
        if delta > 0:
            avg_gain += delta
        elif delta < 0:
            avg_loss -= delta
        avg_gain /= period
        avg_loss /= period

        if avg_loss == 0:
            if strict:
                raise DegenerateWindowError(len(result), "the RSI")
            logger.debug(f"RSI average loss is zero at output index {len(result)}")
        result.append(_rsi_from_averages(avg_gain, avg_loss))

    logger.debug(f"Computed {len(result)} RSI values from {len(prices)} prices (period={period})")
    return result
