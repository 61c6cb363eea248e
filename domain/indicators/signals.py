"""Threshold signals layered on top of oscillator values.

RSI is usually read against 70/30 bars and %K against 80/20. These helpers
only interpret indicator output; they never change it.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class Zone(str, Enum):
    """Where an oscillator value sits relative to its bars."""
    OVERBOUGHT = "overbought"
    OVERSOLD = "oversold"
    NEUTRAL = "neutral"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class SwingRejection:
    """A completed Wilder swing rejection.

    Attributes:
        index: Position in the RSI series where the pattern completed
        kind: "bullish" or "bearish"
        pivot: The reading (#2) whose break completed the pattern
        value: The RSI value that broke the pivot
    """
    index: int
    kind: str
    pivot: float
    value: float


def classify_zone(value: float, overbought: float, oversold: float) -> Zone:
    """Classify a single oscillator value.

    Example:
        >>> classify_zone(75.0, 70, 30)
        <Zone.OVERBOUGHT: 'overbought'>
        >>> classify_zone(float("nan"), 70, 30)
        <Zone.UNDEFINED: 'undefined'>

    Notes:
        - Bars are exclusive: a value equal to a bar is NEUTRAL
        - nan is UNDEFINED; infinities fall on the matching side
    """
    if math.isnan(value):
        return Zone.UNDEFINED
    if value > overbought:
        return Zone.OVERBOUGHT
    if value < oversold:
        return Zone.OVERSOLD
    return Zone.NEUTRAL


def _both_defined(*values: float) -> bool:
    return not any(v is None or math.isnan(v) for v in values)


def crossover(series: Sequence[float], level: float | Sequence[float]) -> list[bool]:
    """Detect when series crosses above level.

    Args:
        series: Indicator values
        level: A constant bar or a second series of the same length

    Returns:
        List of booleans, True where series[i-1] <= level[i-1] and series[i] > level[i]

    Example:
        >>> crossover([25, 29, 31, 35], 30)
        [False, False, True, False]

    Notes:
        - First element is always False (no previous value to compare)
        - Pairs involving nan or None never cross
    """
    if not series:
        return []
    levels = [level] * len(series) if isinstance(level, (int, float)) else list(level)
    if len(levels) != len(series):
        raise ValueError("series and level must have same length")

    result = [False]
    for i in range(1, len(series)):
        if not _both_defined(series[i], levels[i], series[i - 1], levels[i - 1]):
            result.append(False)
        else:
            result.append(series[i - 1] <= levels[i - 1] and series[i] > levels[i])
    return result


def crossunder(series: Sequence[float], level: float | Sequence[float]) -> list[bool]:
    """Detect when series crosses below level.

    Example:
        >>> crossunder([75, 71, 69, 65], 70)
        [False, False, True, False]
    """
    if not series:
        return []
    levels = [level] * len(series) if isinstance(level, (int, float)) else list(level)
    if len(levels) != len(series):
        raise ValueError("series and level must have same length")

    result = [False]
    for i in range(1, len(series)):
        if not _both_defined(series[i], levels[i], series[i - 1], levels[i - 1]):
            result.append(False)
        else:
            result.append(series[i - 1] >= levels[i - 1] and series[i] < levels[i])
    return result


def _scan_bullish(values: Sequence[float], oversold: float) -> list[SwingRejection]:
    found = []
    state = "idle"
    pivot = 0.0
    for i, value in enumerate(values):
        if math.isnan(value):
            state = "idle"
            continue
        if value < oversold:
            # 1. entered (or fell back into) oversold territory
            state = "oversold"
        elif value == oversold:
            # On the bar is not an exit, and a dip that touches it fails step 3
            if state != "oversold":
                state = "idle"
        elif state == "oversold":
            # 2. exited oversold; this reading starts the pivot
            state = "rising"
            pivot = value
        elif state == "rising":
            if value >= pivot:
                pivot = value
            else:
                # 3. dipped below #2 but stayed above the bar
                state = "dipped"
        elif state == "dipped" and value > pivot:
            # 4. broke the most recent high
            found.append(SwingRejection(index=i, kind="bullish", pivot=pivot, value=value))
            state = "idle"
    return found


def swing_rejections(
    rsi_values: Sequence[float],
    overbought: float = 70.0,
    oversold: float = 30.0,
) -> list[SwingRejection]:
    """Find Wilder bullish and bearish swing rejections in an RSI series.

    Bullish: RSI drops below ``oversold``, climbs back above it to a high
    (#2), dips while staying strictly above the bar, then breaks that high.
    Bearish is the mirror image around ``overbought``.

    Args:
        rsi_values: RSI series as returned by ``rsi``
        overbought: Upper bar (default: 70)
        oversold: Lower bar (default: 30)

    Returns:
        Patterns ordered by completion index

    Example:
        >>> swing_rejections([35, 25, 32, 40, 36, 42])
        [SwingRejection(index=5, kind='bullish', pivot=40, value=42)]
    """
    if overbought <= oversold:
        raise ValueError("overbought must be greater than oversold")

    bullish = _scan_bullish(rsi_values, oversold)
    # Mirror around zero so the bearish pattern reuses the bullish scan.
    mirrored = [-v for v in rsi_values]
    bearish = [
        SwingRejection(index=s.index, kind="bearish", pivot=-s.pivot, value=-s.value)
        for s in _scan_bullish(mirrored, -overbought)
    ]
    return sorted(bullish + bearish, key=lambda s: s.index)
