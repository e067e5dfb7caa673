"""Tests for trade-to-trade price coloring."""

from dataclasses import replace

from factories import make_order

from dexview.models import GREEN, RED, DecoratedOrder, TokenPair
from dexview.orders.decorate import decorate_order
from dexview.orders.trend import color_trend


def _trades(pair: TokenPair, prices: list[str]) -> list[DecoratedOrder]:
    """Decorated trades with ascending timestamps at the given prices."""
    return [
        decorate_order(make_order(order_id=i + 1, price=p, timestamp=i * 60), pair)
        for i, p in enumerate(prices)
    ]


class TestColorTrend:
    """Tests for color_trend."""

    def test_empty(self) -> None:
        assert color_trend([]) == []

    def test_first_trade_is_green(self, pair: TokenPair) -> None:
        result = color_trend(_trades(pair, ["5"]))
        assert [o.token_price_class for o in result] == [GREEN]

    def test_up_flat_down(self, pair: TokenPair) -> None:
        """Higher or equal is green, strictly lower is red."""
        result = color_trend(_trades(pair, ["1", "2", "2", "1.5", "3"]))
        assert [o.token_price_class for o in result] == [GREEN, GREEN, GREEN, RED, GREEN]

    def test_compares_to_immediate_predecessor_only(self, pair: TokenPair) -> None:
        """A recovery that stays below an earlier peak is still green."""
        result = color_trend(_trades(pair, ["10", "1", "2"]))
        assert [o.token_price_class for o in result] == [GREEN, RED, GREEN]

    def test_same_id_as_previous_is_green(self, pair: TokenPair) -> None:
        """A repeated id compares equal to itself even at a lower price."""
        first, second = _trades(pair, ["2", "1"])
        second = replace(second, id=first.id)
        result = color_trend([first, second])
        assert [o.token_price_class for o in result] == [GREEN, GREEN]

    def test_undefined_price_is_green(self, pair: TokenPair) -> None:
        trades = _trades(pair, ["2", "1", "0.5"])
        trades[1] = replace(trades[1], token_price=None)
        result = color_trend(trades)
        assert [o.token_price_class for o in result] == [GREEN, GREEN, GREEN]

    def test_order_sensitive(self, pair: TokenPair) -> None:
        """Reversing the input changes the coloring."""
        trades = _trades(pair, ["1", "2", "3"])
        forward = [o.token_price_class for o in color_trend(trades)]
        backward = [o.token_price_class for o in color_trend(list(reversed(trades)))]
        assert forward == [GREEN, GREEN, GREEN]
        assert backward == [GREEN, RED, RED]

    def test_custom_colors(self, pair: TokenPair) -> None:
        result = color_trend(_trades(pair, ["2", "1"]), up_color="up", down_color="down")
        assert [o.token_price_class for o in result] == ["up", "down"]

    def test_inputs_not_modified(self, pair: TokenPair) -> None:
        trades = _trades(pair, ["2", "1"])
        color_trend(trades)
        assert all(o.token_price_class is None for o in trades)
