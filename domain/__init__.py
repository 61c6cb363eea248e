from .indicators import (
    DegenerateWindowError,
    IndicatorError,
    InsufficientDataError,
    OHLCSample,
    rsi,
    stochastic_oscillator,
)

__all__ = [
    "OHLCSample",
    "IndicatorError",
    "InsufficientDataError",
    "DegenerateWindowError",
    "rsi",
    "stochastic_oscillator",
]
