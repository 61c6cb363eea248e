"""
Configuration schema with validation.

All configuration is validated at load time using Pydantic.
"""

from pydantic import BaseModel, Field, field_validator


class RsiConfig(BaseModel):
    """RSI period and reading bars."""

    period: int = Field(default=14, ge=1, le=500, description="Wilder smoothing period")
    overbought: float = Field(default=70.0, gt=0.0, lt=100.0, description="RSI above = overbought")
    oversold: float = Field(default=30.0, gt=0.0, lt=100.0, description="RSI below = oversold")

    @field_validator("oversold")
    @classmethod
    def oversold_lt_overbought(cls, v: float, info) -> float:
        overbought = info.data.get("overbought", 70.0)
        if v >= overbought:
            raise ValueError("oversold must be less than overbought")
        return v


class StochasticConfig(BaseModel):
    """Stochastic %K lookback and reading bars."""

    period: int = Field(default=14, ge=1, le=500, description="High/low lookback window")
    overbought: float = Field(default=80.0, gt=0.0, lt=100.0)
    oversold: float = Field(default=20.0, gt=0.0, lt=100.0)

    @field_validator("oversold")
    @classmethod
    def oversold_lt_overbought(cls, v: float, info) -> float:
        overbought = info.data.get("overbought", 80.0)
        if v >= overbought:
            raise ValueError("oversold must be less than overbought")
        return v


class IndicatorConfig(BaseModel):
    """
    Root configuration model.

    All settings are validated on load.
    """

    rsi: RsiConfig = Field(default_factory=RsiConfig)
    stochastic: StochasticConfig = Field(default_factory=StochasticConfig)

    # Zero-denominator ratios: False propagates inf/nan, True raises
    strict: bool = Field(default=False, description="Raise on degenerate windows")
