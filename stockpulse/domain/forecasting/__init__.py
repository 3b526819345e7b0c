"""
Forecasting bounded context, domain layer.

This module contains all domain logic for the forecasting context:
- Technical indicators (RSI, SMA, Bollinger Bands)
- Feature extraction from daily OHLCV series
- Heuristic signal scoring (BUY / SELL / HOLD)
"""
