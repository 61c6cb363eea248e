"""Rolling window extremes."""

import math
from collections import deque
from typing import Callable, Deque, Sequence

from domain.indicators.base import validate_period


def _rolling_extreme(
    values: Sequence[float],
    period: int,
    evicts: Callable[[float, float], bool],
) -> list[float]:
    # Monotonic deque of indices; values[dq[0]] is the extreme of the current window.
    # nan never enters the deque: earlier nan entries are skipped, and a nan
    # at the window end makes that window's result nan.
    period = validate_period(period)
    result = []
    dq: Deque[int] = deque()
    for i in range(len(values)):
        while dq and dq[0] <= i - period:
            dq.popleft()
        current_is_nan = math.isnan(values[i])
        if not current_is_nan:
            while dq and evicts(values[dq[-1]], values[i]):
                dq.pop()
            dq.append(i)
        if i >= period - 1:
            result.append(math.nan if current_is_nan else values[dq[0]])
    return result


def highest(values: Sequence[float], period: int) -> list[float]:
    """Find highest value over each full rolling window.

    Args:
        values: List of values
        period: Lookback period

    Returns:
        List of highest values, one per window ending at index ``period - 1``
        or later. Length is ``len(values) - period + 1`` (empty when shorter).

    Example:
        >>> highest([10, 12, 11, 15, 14, 13], 3)
        [12, 15, 15, 15]

    Notes:
        - O(n) using a monotonic deque, independent of period
        - nan inside a window is ignored; nan in the last slot gives nan
    """
    return _rolling_extreme(values, period, lambda kept, new: kept <= new)


def lowest(values: Sequence[float], period: int) -> list[float]:
    """Find lowest value over each full rolling window.

    Example:
        >>> lowest([10, 12, 11, 15, 14, 13], 3)
        [10, 11, 11, 13]
    """
    return _rolling_extreme(values, period, lambda kept, new: kept >= new)
