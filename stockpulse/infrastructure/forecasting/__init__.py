"""
Infrastructure adapters for the forecasting bounded context.

Each adapter implements a domain port (ABC) and connects
to external systems or stands in for them.
"""
