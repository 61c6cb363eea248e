"""Momentum oscillators over chronological price history.

This package provides pure Python implementations of the Relative Strength
Index and the Stochastic Oscillator, plus the threshold helpers callers use
to read them.

Indicators:
    - RSI: Relative Strength Index using Wilder's smoothing
    - Stochastic: Stochastic Oscillator %K over a trailing high/low window
    - Windows: O(n) rolling highest/lowest
    - Signals: Zone classification, crossover, crossunder, swing rejections
    - Snapshot: Both oscillators over one OHLC history, driven by config

Example:
    >>> from domain.indicators import rsi, stochastic_oscillator
    >>>
    >>> closes = [10, 12, 15, 13, 18, 10, 12, 15, 13, 18, 10, 12, 15, 13, 18]
    >>> rsi(closes, period=14)
    [57.69...]
    >>> stochastic_oscillator([(15, 10, 20), (18, 13, 22)] * 7)
    [66.66...]
"""

from domain.indicators.base import (
    DegenerateWindowError,
    IndicatorError,
    InsufficientDataError,
    OHLCSample,
)
from domain.indicators.rsi import rsi
from domain.indicators.signals import (
    SwingRejection,
    Zone,
    classify_zone,
    crossover,
    crossunder,
    swing_rejections,
)
from domain.indicators.snapshot import MomentumSnapshot, momentum_snapshot
from domain.indicators.stochastic import stochastic_oscillator
from domain.indicators.windows import highest, lowest

__all__ = [
    # Base types
    "OHLCSample",
    "IndicatorError",
    "InsufficientDataError",
    "DegenerateWindowError",
    # Oscillators
    "rsi",
    "stochastic_oscillator",
    # Rolling windows
    "highest",
    "lowest",
    # Signals
    "Zone",
    "SwingRejection",
    "classify_zone",
    "crossover",
    "crossunder",
    "swing_rejections",
    # Composition
    "MomentumSnapshot",
    "momentum_snapshot",
]
