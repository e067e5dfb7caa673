"""Aggregation of decorated orders into the order book and price chart."""

from dexview.aggregation.candles import build_candles, build_price_chart, bucket_start, last_prices
from dexview.aggregation.order_book import build_order_book, sort_by_price_desc

__all__ = [
    "bucket_start",
    "build_candles",
    "build_order_book",
    "build_price_chart",
    "last_prices",
    "sort_by_price_desc",
]
