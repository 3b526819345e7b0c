"""HTTP interface for the forecasting bounded context."""
