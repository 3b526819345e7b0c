"""
Application layer for the forecasting bounded context.

Use cases coordinate domain services and ports to fulfill
prediction and symbol-search requests. No framework or
infrastructure imports allowed.
"""
