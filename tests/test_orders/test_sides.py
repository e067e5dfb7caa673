"""Tests for buy/sell side assignment."""

from factories import make_order

from dexview.models import GREEN, RED, OrderSide, TokenPair
from dexview.orders.sides import assign_side, fill_action, side_color


class TestAssignSide:
    def test_giving_quote_token_is_buy(self, pair: TokenPair) -> None:
        assert assign_side(make_order(side=OrderSide.BUY), pair) == OrderSide.BUY

    def test_giving_base_token_is_sell(self, pair: TokenPair) -> None:
        assert assign_side(make_order(side=OrderSide.SELL), pair) == OrderSide.SELL

    def test_side_follows_pair_orientation(self, pair: TokenPair) -> None:
        """Flipping the pair flips the side of the same order."""
        flipped = TokenPair(token0=pair.token1, token1=pair.token0)
        order = make_order(side=OrderSide.BUY)
        assert assign_side(order, flipped) == OrderSide.SELL


class TestFillAction:
    def test_opposite_side(self) -> None:
        assert fill_action(OrderSide.BUY) == OrderSide.SELL
        assert fill_action(OrderSide.SELL) == OrderSide.BUY


class TestSideColor:
    def test_default_colors(self) -> None:
        assert side_color(OrderSide.BUY) == GREEN
        assert side_color(OrderSide.SELL) == RED

    def test_custom_colors(self) -> None:
        assert side_color(OrderSide.SELL, "green", "red") == "red"
