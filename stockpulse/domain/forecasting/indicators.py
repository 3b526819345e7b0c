"""
Technical indicator library.

Pure numeric functions over price/volume sequences:
- RSI (simple average of the last N gains/losses)
- Simple moving average
- Bollinger Bands

No state, no IO. Short inputs degrade to documented defaults
instead of raising.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

NEUTRAL_RSI = 50.0
MAX_RSI = 100.0


@dataclass(frozen=True)
class BollingerBands:
    """Upper, middle and lower Bollinger band values."""

    upper: float
    middle: float
    lower: float


def rsi(closes: Sequence[float], period: int = 14) -> float:
    """Compute the relative strength index over the last `period` changes.

    Args:
        closes: Closing prices, oldest first.
        period: Number of trailing price changes to average.

    Returns:
        RSI in [0, 100]. 50 when fewer than `period + 1` closes exist,
        100 when the average loss is zero.
    """
    if len(closes) < period + 1:
        return NEUTRAL_RSI

    changes = np.diff(np.asarray(closes, dtype=float))[-period:]
    avg_gain = float(np.clip(changes, 0, None).sum()) / period
    avg_loss = float(np.clip(-changes, 0, None).sum()) / period

    if avg_loss == 0:
        return MAX_RSI
    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def sma(values: Sequence[float], period: int) -> float:
    """Arithmetic mean of the trailing `period` values.

    When fewer than `period` values exist the last value is returned
    as-is rather than an average of what is available.

    Raises:
        ValueError: If `values` is empty.
    """
    if len(values) == 0:
        raise ValueError("sma requires at least one value")
    if len(values) < period:
        return float(values[-1])
    return float(np.mean(np.asarray(values[-period:], dtype=float)))


def bollinger_bands(
    closes: Sequence[float], period: int = 20, num_std: float = 2.0
) -> BollingerBands:
    """Compute Bollinger Bands around SMA(`period`).

    The squared deviations of the trailing window are divided by
    `period`, which is the population variance once `period` closes
    are available.
    """
    middle = sma(closes, period)
    window = np.asarray(closes[-period:], dtype=float)
    std_dev = float(np.sqrt(np.sum((window - middle) ** 2) / period))
    return BollingerBands(
        upper=middle + num_std * std_dev,
        middle=middle,
        lower=middle - num_std * std_dev,
    )
