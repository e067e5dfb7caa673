"""Trade-to-trade price coloring for the trade history.

Each trade is colored against the one before it: up or flat is green,
down is red. The result for one element depends on its predecessor's
price, so the pass is a strict left-to-right fold.
"""

from collections.abc import Sequence
from dataclasses import replace

from dexview.models import GREEN, RED, DecoratedOrder


def price_class(
    order: DecoratedOrder,
    previous: DecoratedOrder,
    up_color: str = GREEN,
    down_color: str = RED,
) -> str:
    """Color for ``order`` given the trade immediately before it.

    An order compared with itself (the first trade) is up. An undefined
    price on either side cannot be compared and counts as up.
    """
    if previous.id_key == order.id_key:
        return up_color
    if previous.token_price is None or order.token_price is None:
        return up_color
    if previous.token_price <= order.token_price:
        return up_color
    return down_color


def color_trend(
    orders: Sequence[DecoratedOrder],
    up_color: str = GREEN,
    down_color: str = RED,
) -> list[DecoratedOrder]:
    """Set ``token_price_class`` on each order relative to its predecessor.

    Args:
        orders: Priced orders sorted ascending by timestamp.
        up_color: Color for a trade at or above the previous price.
        down_color: Color for a trade below the previous price.

    Returns:
        New orders, same order and length as the input.
    """
    if not orders:
        return []

    colored: list[DecoratedOrder] = []
    previous = orders[0]
    for order in orders:
        current = replace(
            order,
            token_price_class=price_class(order, previous, up_color, down_color),
        )
        colored.append(current)
        previous = current
    return colored
