"""
Domain service: Heuristic signal scoring.

Pure business logic mapping extracted features and a forecast
timeframe to a BUY / SELL / HOLD signal with a confidence.
No framework imports. No IO. No side effects.

Scoring rules:
    - RSI: <30 +2, >70 -2, [30, 50) +1, otherwise -1
    - Trend: bullish +1, bearish -1
    - Rising volume confirms the trend: +1 bullish, -1 bearish
    - High volatility dampens the score by 20%
    - Same-day forecasts are penalized in both score and confidence
"""

from stockpulse.domain.forecasting.entities import (
    Features,
    Signal,
    SignalScore,
    Timeframe,
    Trend,
    Volatility,
    VolumeTrend,
)

OVERSOLD_RSI = 30.0
OVERBOUGHT_RSI = 70.0
MIDLINE_RSI = 50.0

HIGH_VOLATILITY_DAMPING = 0.8
TODAY_CONFIDENCE_FACTOR = 0.8
TODAY_SCORE_FACTOR = 0.9
MAX_POINTS_PER_SIGNAL = 2

SCORE_THRESHOLD = 1.0
CONFIDENCE_THRESHOLDS = {
    Timeframe.TODAY: 0.5,
    Timeframe.TOMORROW: 0.6,
}


def score_features(features: Features, timeframe: Timeframe) -> SignalScore:
    """Score features and decide on a trading signal.

    Args:
        features: Classified indicator features.
        timeframe: Forecast horizon.

    Returns:
        The final score, contributing signal count, confidence and prediction.
    """
    score = 0.0
    signals = 0

    if features.rsi < OVERSOLD_RSI:
        score += 2
    elif features.rsi > OVERBOUGHT_RSI:
        score -= 2
    elif features.rsi < MIDLINE_RSI:
        score += 1
    else:
        score -= 1
    signals += 1

    score += 1 if features.trend is Trend.BULLISH else -1
    signals += 1

    if features.volume_trend is VolumeTrend.INCREASING:
        score += 1 if features.trend is Trend.BULLISH else -1
        signals += 1

    if features.volatility is Volatility.HIGH:
        score *= HIGH_VOLATILITY_DAMPING

    confidence = min(abs(score) / (signals * MAX_POINTS_PER_SIGNAL), 1.0)

    if timeframe is Timeframe.TODAY:
        confidence *= TODAY_CONFIDENCE_FACTOR
        score *= TODAY_SCORE_FACTOR

    threshold = CONFIDENCE_THRESHOLDS[timeframe]
    if score > SCORE_THRESHOLD and confidence > threshold:
        prediction = Signal.BUY
    elif score < -SCORE_THRESHOLD and confidence > threshold:
        prediction = Signal.SELL
    else:
        prediction = Signal.HOLD

    return SignalScore(
        score=score,
        signals=signals,
        raw_confidence=confidence,
        confidence=round(confidence * 100),
        prediction=prediction,
    )
