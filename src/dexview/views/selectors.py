"""Memoized view selectors.

A UI recomputes its views whenever store state changes, but most changes
touch only some inputs: a new trade leaves the order book's open-order
inputs alone. ViewSelector remembers the last inputs of each view and hands
back the previous result while they are unchanged.

Order collections are compared by identity (the store replaces a
collection when it changes). Account and token pair are compared by value.
Memoization never changes a result, only whether it is recomputed.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from dexview.logging import get_logger
from dexview.models import (
    DecoratedOrder,
    ExchangeState,
    ExchangeViews,
    OrderBook,
    PriceChart,
)
from dexview.views.composer import ViewComposer

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class _Inputs:
    """Inputs of one view: collections checked by identity, the rest by value."""

    collections: tuple[Any, ...]
    values: tuple[Any, ...]

    def matches(self, other: "_Inputs") -> bool:
        if len(self.collections) != len(other.collections):
            return False
        if any(a is not b for a, b in zip(self.collections, other.collections)):
            return False
        return self.values == other.values


class ViewSelector:
    """Memoizing front for a ViewComposer.

    Args:
        composer: The composer doing the actual work. A default one is
            created when omitted.
    """

    def __init__(self, composer: ViewComposer | None = None) -> None:
        self._composer = composer or ViewComposer()
        self._cache: dict[str, tuple[_Inputs, Any]] = {}

    def my_open_orders(self, state: ExchangeState) -> tuple[DecoratedOrder, ...] | None:
        inputs = _Inputs(
            collections=(state.all_orders, state.filled_orders, state.cancelled_orders),
            values=(state.account, state.pair),
        )
        return self._select("my_open_orders", inputs, state, self._composer.my_open_orders)

    def trade_history(self, state: ExchangeState) -> tuple[DecoratedOrder, ...] | None:
        inputs = _Inputs(collections=(state.filled_orders,), values=(state.pair,))
        return self._select("trade_history", inputs, state, self._composer.trade_history)

    def order_book(self, state: ExchangeState) -> OrderBook | None:
        inputs = _Inputs(
            collections=(state.all_orders, state.filled_orders, state.cancelled_orders),
            values=(state.pair,),
        )
        return self._select("order_book", inputs, state, self._composer.order_book)

    def price_chart(self, state: ExchangeState) -> PriceChart | None:
        inputs = _Inputs(collections=(state.filled_orders,), values=(state.pair,))
        return self._select("price_chart", inputs, state, self._composer.price_chart)

    def compose(self, state: ExchangeState) -> ExchangeViews:
        return ExchangeViews(
            my_open_orders=self.my_open_orders(state),
            trade_history=self.trade_history(state),
            order_book=self.order_book(state),
            price_chart=self.price_chart(state),
        )

    def clear(self) -> None:
        """Forget every cached view."""
        self._cache.clear()

    def _select(
        self,
        view: str,
        inputs: _Inputs,
        state: ExchangeState,
        compute: Callable[[ExchangeState], T],
    ) -> T:
        cached = self._cache.get(view)
        if cached is not None and cached[0].matches(inputs):
            return cached[1]

        result = compute(state)
        self._cache[view] = (inputs, result)
        logger.debug("view_recomputed", view=view)
        return result
