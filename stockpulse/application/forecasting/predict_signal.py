"""
Use case: Predict a trading signal for a ticker symbol.

Input: PredictSignalCommand (symbol, timeframe)
Output: PredictionResultDTO
Side effects: May populate the series cache through the provider.
Failure cases: InvalidSymbolError, InvalidTimeframeError, EmptySeriesError.
"""

import logging
import random
from typing import Optional

from stockpulse.application.forecasting.dtos import (
    FeaturesResult,
    PredictionResultDTO,
    PredictSignalCommand,
)
from stockpulse.domain.forecasting.entities import PredictionResult, Timeframe
from stockpulse.domain.forecasting.errors import (
    EmptySeriesError,
    InvalidSymbolError,
    InvalidTimeframeError,
)
from stockpulse.domain.forecasting.feature_extractor import extract_features
from stockpulse.domain.forecasting.ports import SeriesProviderPort
from stockpulse.domain.forecasting.signal_scorer import score_features

logger = logging.getLogger(__name__)

# Display-only accuracy band, not backtested.
ACCURACY_FLOOR = 75.0
ACCURACY_SPREAD = 15.0
TODAY_ACCURACY_FACTOR = 0.85


class PredictSignalUseCase:
    """Orchestrates series resolution, feature extraction and scoring.

    Validates the request, resolves the daily series through the
    SeriesProviderPort, and assembles the prediction. The accuracy
    figure is drawn from the injected random source for display only.
    """

    def __init__(
        self,
        series_provider: SeriesProviderPort,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._series_provider = series_provider
        self._rng = rng or random.Random()

    def execute(self, command: PredictSignalCommand) -> PredictionResultDTO:
        """Run the signal prediction use case.

        Args:
            command: The prediction request containing symbol and timeframe.

        Returns:
            The trading signal with confidence, accuracy and features.

        Raises:
            InvalidSymbolError: If the symbol is blank.
            InvalidTimeframeError: If timeframe is not "today" or "tomorrow".
            EmptySeriesError: If the resolved series has no bars.
        """
        symbol = (command.symbol or "").strip().upper()
        if not symbol:
            raise InvalidSymbolError(command.symbol)

        try:
            timeframe = Timeframe(command.timeframe)
        except ValueError:
            raise InvalidTimeframeError(command.timeframe) from None

        logger.info(
            "Predicting signal for symbol=%s, timeframe=%s",
            symbol,
            timeframe.value,
        )

        series = self._series_provider.get_series(symbol)
        if not series:
            raise EmptySeriesError(symbol)

        features = extract_features(series, symbol=symbol)
        signal = score_features(features, timeframe)

        result = PredictionResult(
            symbol=symbol,
            prediction=signal.prediction,
            confidence=signal.confidence,
            accuracy=self._synthesize_accuracy(timeframe),
            timeframe=timeframe,
            features=features,
        )
        logger.debug(
            "Signal for %s: %s (score=%.2f, signals=%d, confidence=%d)",
            symbol,
            signal.prediction.value,
            signal.score,
            signal.signals,
            signal.confidence,
        )

        return PredictionResultDTO(
            symbol=result.symbol,
            prediction=result.prediction.value,
            confidence=result.confidence,
            accuracy=result.accuracy,
            timeframe=result.timeframe.value,
            features=FeaturesResult(
                rsi=result.features.rsi,
                trend=result.features.trend.value,
                volatility=result.features.volatility.value,
                volume_trend=result.features.volume_trend.value,
            ),
        )

    def _synthesize_accuracy(self, timeframe: Timeframe) -> float:
        """Draw an illustrative accuracy in 75-90%, reduced for same-day."""
        accuracy = ACCURACY_FLOOR + self._rng.random() * ACCURACY_SPREAD
        if timeframe is Timeframe.TODAY:
            accuracy *= TODAY_ACCURACY_FACTOR
        return round(accuracy, 2)
