"""Open-order classification by set difference over order ids.

An order is open when its id appears in neither the filled nor the
cancelled collection. Ids are compared by their string form so that the
same id decoded as an int by one source and as a string by another still
matches.
"""

from collections.abc import Iterable, Sequence

from dexview.logging import get_logger
from dexview.models import Order

logger = get_logger(__name__)


def _id_keys(orders: Iterable[Order]) -> set[str]:
    return {o.id_key for o in orders if o.id is not None}


def open_orders(
    all_orders: Sequence[Order],
    filled: Sequence[Order],
    cancelled: Sequence[Order],
) -> list[Order]:
    """Return the orders of ``all_orders`` that are neither filled nor cancelled.

    Args:
        all_orders: Every order ever placed, in event order.
        filled: Orders that have been filled.
        cancelled: Orders that have been cancelled.

    Returns:
        The open orders, in the same relative order as ``all_orders``.
        An order without an id cannot be classified; it is logged and left
        out rather than failing the whole collection.
    """
    closed = _id_keys(filled) | _id_keys(cancelled)

    result: list[Order] = []
    for order in all_orders:
        if order.id is None:
            logger.warning("order_unclassifiable", user=order.user, timestamp=order.timestamp)
            continue
        if order.id_key not in closed:
            result.append(order)
    return result


def conflicting_ids(filled: Sequence[Order], cancelled: Sequence[Order]) -> set[str]:
    """Return ids present in both the filled and cancelled collections.

    A contract cannot fill a cancelled order, so any id returned here
    points at a problem in the event source.
    """
    return _id_keys(filled) & _id_keys(cancelled)
