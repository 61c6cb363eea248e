"""Stochastic Oscillator indicator."""

import logging
from typing import Sequence

from domain.indicators.base import (
    DegenerateWindowError,
    OHLCSample,
    ieee_divide,
    require_length,
    validate_period,
)
from domain.indicators.windows import highest, lowest

logger = logging.getLogger(__name__)


def stochastic_oscillator(
    samples: Sequence[OHLCSample | tuple[float, float, float]],
    period: int = 14,
    strict: bool = False,
) -> list[float]:
    """Calculate the Stochastic Oscillator (%K).

    %K = 100 * (Close - Lowest Low) / (Highest High - Lowest Low)

    Args:
        samples: Chronologically ordered (close, low, high) samples
        period: Lookback period (default: 14)
        strict: Raise DegenerateWindowError on a flat window instead of
            emitting a non-finite value

    Returns:
        List of %K values, one per full window. Length is
        ``len(samples) - period + 1``.

    Raises:
        InsufficientDataError: If fewer than ``period`` samples are given
        DegenerateWindowError: In strict mode, when highest high equals lowest low
        ValueError: If period is not a positive integer

    Example:
        >>> samples = [(15, 10, 20), (18, 13, 22)] * 7
        >>> stochastic_oscillator(samples)
        [66.66...]

    Notes:
        - The window includes the current sample
        - A flat window gives nan (close on the range) or +/-inf, never 50
        - A nan low or high is skipped inside the window; on the current
          sample it makes that %K nan
    """
    period = validate_period(period)
    require_length(samples, period, "stochastic oscillator")

    closes = []
    lows = []
    highs = []
    for close, low, high in samples:
        closes.append(close)
        lows.append(low)
        highs.append(high)

    lowest_lows = lowest(lows, period)
    highest_highs = highest(highs, period)

    result = []
    for offset, (low_n, high_n) in enumerate(zip(lowest_lows, highest_highs)):
        close = closes[offset + period - 1]
        span = high_n - low_n
        if span == 0:
            if strict:
                raise DegenerateWindowError(offset, "stochastic oscillator")
            logger.debug(f"Flat stochastic window at output index {offset}")
        result.append(ieee_divide(close - low_n, span) * 100.0)

    logger.debug(f"Computed {len(result)} %K values from {len(samples)} samples (period={period})")
    return result
