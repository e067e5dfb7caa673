"""Per-order building blocks: classification, pricing, sides, decoration, trend.

Every function here is pure and works on immutable Order/DecoratedOrder
values; aggregation across orders lives in dexview.aggregation.
"""

from dexview.orders.classifier import conflicting_ids, open_orders
from dexview.orders.decorate import decorate_order, with_fill_action, with_order_type
from dexview.orders.pricing import PriceQuote, compute_token_price, format_units, normalize
from dexview.orders.sides import assign_side, fill_action, side_color
from dexview.orders.trend import color_trend, price_class

__all__ = [
    "PriceQuote",
    "assign_side",
    "color_trend",
    "compute_token_price",
    "conflicting_ids",
    "decorate_order",
    "fill_action",
    "format_units",
    "normalize",
    "open_orders",
    "price_class",
    "side_color",
    "with_fill_action",
    "with_order_type",
]
