"""Construction of DecoratedOrder values.

Every decoration returns a new frozen value; the input Order is never
touched. View-specific fields are layered on with ``dataclasses.replace``.
"""

from dataclasses import fields, replace
from datetime import timezone, tzinfo

from dexview.models import GREEN, PRICE_PRECISION, RED, DecoratedOrder, Order, TokenPair
from dexview.orders.pricing import normalize
from dexview.orders.sides import assign_side, fill_action, side_color
from dexview.timeutils import format_timestamp

_ORDER_FIELDS = tuple(f.name for f in fields(Order))


def decorate_order(
    order: Order,
    pair: TokenPair,
    precision: int = PRICE_PRECISION,
    tz: tzinfo = timezone.utc,
) -> DecoratedOrder:
    """Attach base/quote amounts, unit price and a display timestamp.

    Args:
        order: The raw order.
        pair: The active token pair.
        precision: Decimal places kept in the price.
        tz: Timezone for ``formatted_timestamp``.

    Returns:
        A new DecoratedOrder with the view-specific fields unset.
    """
    quote = normalize(order, pair, precision=precision)
    return DecoratedOrder(
        **{name: getattr(order, name) for name in _ORDER_FIELDS},
        token0_amount=quote.token0_amount,
        token1_amount=quote.token1_amount,
        token_price=quote.token_price,
        formatted_timestamp=format_timestamp(order.timestamp, tz),
    )


def with_order_type(
    order: DecoratedOrder,
    pair: TokenPair,
    buy_color: str = GREEN,
    sell_color: str = RED,
) -> DecoratedOrder:
    """Add ``order_type`` and its color (my-open-orders rows)."""
    side = assign_side(order, pair)
    return replace(
        order,
        order_type=side,
        order_type_class=side_color(side, buy_color, sell_color),
    )


def with_fill_action(
    order: DecoratedOrder,
    pair: TokenPair,
    buy_color: str = GREEN,
    sell_color: str = RED,
) -> DecoratedOrder:
    """Add ``order_type``, its color and the counterparty action (order-book rows)."""
    typed = with_order_type(order, pair, buy_color, sell_color)
    return replace(typed, order_fill_action=fill_action(typed.order_type))
