"""Combined momentum view over one OHLC history."""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from config import IndicatorConfig, get_config
from domain.indicators.base import OHLCSample
from domain.indicators.rsi import rsi
from domain.indicators.signals import SwingRejection, Zone, classify_zone, swing_rejections
from domain.indicators.stochastic import stochastic_oscillator

logger = logging.getLogger(__name__)


@dataclass
class MomentumSnapshot:
    """RSI and %K series for one history, with the latest reading classified."""
    rsi: list[float]
    stochastic: list[float]
    rsi_zone: Zone
    stochastic_zone: Zone
    rsi_swings: list[SwingRejection] = field(default_factory=list)

    @property
    def latest_rsi(self) -> float:
        return self.rsi[-1]

    @property
    def latest_k(self) -> float:
        return self.stochastic[-1]


def momentum_snapshot(
    samples: Sequence[OHLCSample | tuple[float, float, float]],
    config: IndicatorConfig | None = None,
) -> MomentumSnapshot:
    """Compute RSI on closes and %K on full samples using configured settings.

    Args:
        samples: Chronologically ordered (close, low, high) samples
        config: Indicator settings (default: loaded configuration)

    Returns:
        MomentumSnapshot

    Raises:
        InsufficientDataError: If either indicator lacks data; the RSI check
            runs first
        DegenerateWindowError: When ``config.strict`` is set and a ratio
            has a zero denominator
    """
    cfg = config or get_config()
    closes = [sample[0] for sample in samples]

    rsi_values = rsi(closes, cfg.rsi.period, strict=cfg.strict)
    k_values = stochastic_oscillator(samples, cfg.stochastic.period, strict=cfg.strict)

    snapshot = MomentumSnapshot(
        rsi=rsi_values,
        stochastic=k_values,
        rsi_zone=classify_zone(rsi_values[-1], cfg.rsi.overbought, cfg.rsi.oversold),
        stochastic_zone=classify_zone(
            k_values[-1], cfg.stochastic.overbought, cfg.stochastic.oversold
        ),
        rsi_swings=swing_rejections(rsi_values, cfg.rsi.overbought, cfg.rsi.oversold),
    )
    logger.debug(
        f"Momentum snapshot: RSI {snapshot.latest_rsi:.2f} ({snapshot.rsi_zone.value}), "
        f"%K {snapshot.latest_k:.2f} ({snapshot.stochastic_zone.value})"
    )
    return snapshot
