"""Order book assembly from decorated open orders."""

from collections.abc import Sequence
from decimal import Decimal
from typing import cast

from dexview.models import DecoratedOrder, OrderBook, OrderSide


def sort_by_price_desc(orders: Sequence[DecoratedOrder]) -> list[DecoratedOrder]:
    """Sort by token price, highest first. Stable; unpriced orders go last."""
    priced = [o for o in orders if o.token_price is not None]
    unpriced = [o for o in orders if o.token_price is None]
    priced.sort(key=lambda o: cast(Decimal, o.token_price), reverse=True)
    return priced + unpriced


def build_order_book(orders: Sequence[DecoratedOrder]) -> OrderBook:
    """Group orders by ``order_type`` and sort each side by price descending.

    Args:
        orders: Open orders decorated with price and ``order_type``.

    Returns:
        OrderBook with both sides; a side with no orders is empty.
    """
    buy = [o for o in orders if o.order_type == OrderSide.BUY]
    sell = [o for o in orders if o.order_type == OrderSide.SELL]
    return OrderBook(
        buy=tuple(sort_by_price_desc(buy)),
        sell=tuple(sort_by_price_desc(sell)),
    )
