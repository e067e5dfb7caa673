"""Custom exceptions for the exchange view pipeline.

The pipeline itself never raises for data-quality problems (zero base
amounts, unclassifiable ids); those degrade to sentinels and log warnings.
Exceptions are reserved for the ingestion boundary.
"""


class DexViewError(Exception):
    """Base exception for all dexview errors."""


class InvalidOrderError(DexViewError):
    """Raised when an order event cannot be turned into an Order."""
