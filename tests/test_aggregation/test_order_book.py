"""Tests for order book assembly."""

from dataclasses import replace
from decimal import Decimal

from factories import make_order

from dexview.aggregation.order_book import build_order_book, sort_by_price_desc
from dexview.models import DecoratedOrder, OrderSide, TokenPair
from dexview.orders.decorate import decorate_order, with_fill_action


def _book_order(pair: TokenPair, order_id: int, price: str, side: OrderSide) -> DecoratedOrder:
    order = make_order(order_id=order_id, price=price, side=side)
    return with_fill_action(decorate_order(order, pair), pair)


class TestBuildOrderBook:
    """Tests for build_order_book."""

    def test_partitions_by_side(self, pair: TokenPair) -> None:
        orders = [
            _book_order(pair, 1, "1", OrderSide.BUY),
            _book_order(pair, 2, "2", OrderSide.SELL),
            _book_order(pair, 3, "3", OrderSide.BUY),
        ]

        book = build_order_book(orders)

        assert {o.id for o in book.buy} == {1, 3}
        assert [o.id for o in book.sell] == [2]

    def test_each_side_sorted_price_descending(self, pair: TokenPair) -> None:
        prices = ["1.5", "3", "0.2", "2.75", "1"]
        orders = [_book_order(pair, i, p, OrderSide.BUY) for i, p in enumerate(prices)] + [
            _book_order(pair, 10 + i, p, OrderSide.SELL) for i, p in enumerate(prices)
        ]

        book = build_order_book(orders)

        for side in (book.buy_orders, book.sell_orders):
            side_prices = [o.token_price for o in side]
            assert side_prices == sorted(side_prices, reverse=True)
            assert all(a >= b for a, b in zip(side_prices, side_prices[1:]))

    def test_equal_prices_keep_input_order(self, pair: TokenPair) -> None:
        orders = [
            _book_order(pair, 1, "2", OrderSide.SELL),
            _book_order(pair, 2, "3", OrderSide.SELL),
            _book_order(pair, 3, "2", OrderSide.SELL),
        ]
        book = build_order_book(orders)
        assert [o.id for o in book.sell] == [2, 1, 3]

    def test_empty_side(self, pair: TokenPair) -> None:
        book = build_order_book([_book_order(pair, 1, "1", OrderSide.BUY)])
        assert book.sell == ()
        assert book.sell_orders == ()

    def test_aliases_match(self, pair: TokenPair) -> None:
        book = build_order_book(
            [_book_order(pair, 1, "1", OrderSide.BUY), _book_order(pair, 2, "1", OrderSide.SELL)]
        )
        assert book.buy_orders == book.buy
        assert book.sell_orders == book.sell


class TestSortByPriceDesc:
    """Tests for sort_by_price_desc."""

    def test_unpriced_orders_last(self, pair: TokenPair) -> None:
        orders = [
            _book_order(pair, 1, "1", OrderSide.BUY),
            replace(_book_order(pair, 2, "5", OrderSide.BUY), token_price=None),
            _book_order(pair, 3, "2", OrderSide.BUY),
        ]
        result = sort_by_price_desc(orders)
        assert [o.id for o in result] == [3, 1, 2]

    def test_does_not_modify_input(self, pair: TokenPair) -> None:
        orders = [_book_order(pair, 1, "1", OrderSide.BUY), _book_order(pair, 2, "2", OrderSide.BUY)]
        sort_by_price_desc(orders)
        assert [o.token_price for o in orders] == [Decimal("1"), Decimal("2")]

    def test_zero_price_ranks_above_unpriced(self, pair: TokenPair) -> None:
        """A zero price is a real price; only None goes to the end."""
        orders = [
            replace(_book_order(pair, 1, "1", OrderSide.SELL), token_price=None),
            _book_order(pair, 2, "0", OrderSide.SELL),
            _book_order(pair, 3, "3", OrderSide.SELL),
        ]
        result = sort_by_price_desc(orders)
        assert [o.id for o in result] == [3, 2, 1]
        assert result[1].token_price == Decimal("0")
