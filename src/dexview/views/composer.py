"""View composition for the exchange UI.

The ViewComposer turns one ExchangeState snapshot into the four views the
presentation layer renders:
1. my open orders (the account's unfilled, uncancelled orders)
2. trade history (filled orders colored by price movement)
3. order book (open orders by side, best price first)
4. price chart (hourly OHLC candles and last price movement)

Each view is None until both tokens of the pair are selected. Every
computation is a pure function of the snapshot, so calling a view twice on
the same state returns equal results.
"""

from collections.abc import Sequence

from dexview.aggregation.candles import build_price_chart
from dexview.aggregation.order_book import build_order_book
from dexview.config import AppSettings, ViewSettings
from dexview.logging import get_logger, setup_logging
from dexview.models import (
    DecoratedOrder,
    ExchangeState,
    ExchangeViews,
    Order,
    OrderBook,
    PriceChart,
    TokenPair,
)
from dexview.orders.classifier import conflicting_ids, open_orders
from dexview.orders.decorate import decorate_order, with_fill_action, with_order_type
from dexview.orders.trend import color_trend
from dexview.timeutils import resolve_timezone

logger = get_logger(__name__)


def filter_by_pair(orders: Sequence[Order], pair: TokenPair) -> list[Order]:
    """Keep orders whose get and give tokens are both in the pair."""
    return [o for o in orders if pair.contains(o)]


def _by_timestamp(
    orders: Sequence[DecoratedOrder], descending: bool = False
) -> tuple[DecoratedOrder, ...]:
    # sorted() is stable in both directions, so equal timestamps keep input order
    return tuple(sorted(orders, key=lambda o: o.timestamp, reverse=descending))


class ViewComposer:
    """Derives display-ready views from order snapshots.

    Args:
        settings: Price precision, candle width, timezone and colors.
            Defaults to ViewSettings() (environment-driven).
    """

    def __init__(self, settings: ViewSettings | None = None) -> None:
        self._settings = settings or ViewSettings()
        self._tz = resolve_timezone(self._settings.timezone)

    @classmethod
    def from_settings(
        cls, settings: AppSettings, configure_logging: bool = False
    ) -> "ViewComposer":
        """Build a composer from the application settings.

        With ``configure_logging`` the root logger is also set up at
        ``settings.log_level``.
        """
        if configure_logging:
            setup_logging(settings.log_level)
        return cls(settings.views)

    @property
    def settings(self) -> ViewSettings:
        return self._settings

    def my_open_orders(self, state: ExchangeState) -> tuple[DecoratedOrder, ...] | None:
        """Open orders placed by ``state.account``, newest first."""
        pair = state.pair
        if pair is None:
            return None

        orders = [o for o in self._open_orders(state) if o.user == state.account]
        orders = filter_by_pair(orders, pair)
        decorated = [
            with_order_type(
                self._decorate(o, pair),
                pair,
                self._settings.up_color,
                self._settings.down_color,
            )
            for o in orders
        ]
        return _by_timestamp(decorated, descending=True)

    def trade_history(self, state: ExchangeState) -> tuple[DecoratedOrder, ...] | None:
        """Filled orders colored against the previous trade, newest first.

        Coloring runs oldest-first so each trade sees its true predecessor;
        only the finished list is flipped for display.
        """
        pair = state.pair
        if pair is None:
            return None

        orders = filter_by_pair(state.filled_orders, pair)
        ascending = sorted(orders, key=lambda o: o.timestamp)
        colored = color_trend(
            [self._decorate(o, pair) for o in ascending],
            self._settings.up_color,
            self._settings.down_color,
        )
        return _by_timestamp(colored, descending=True)

    def order_book(self, state: ExchangeState) -> OrderBook | None:
        """Open orders for the pair split into buy and sell sides."""
        pair = state.pair
        if pair is None:
            return None

        orders = filter_by_pair(self._open_orders(state), pair)
        decorated = [
            with_fill_action(
                self._decorate(o, pair),
                pair,
                self._settings.up_color,
                self._settings.down_color,
            )
            for o in orders
        ]
        return build_order_book(decorated)

    def price_chart(self, state: ExchangeState) -> PriceChart | None:
        """Candles and last price movement for the pair's filled orders."""
        pair = state.pair
        if pair is None:
            return None

        orders = filter_by_pair(state.filled_orders, pair)
        ascending = sorted(orders, key=lambda o: o.timestamp)
        decorated = [self._decorate(o, pair) for o in ascending]
        return build_price_chart(
            decorated,
            interval_seconds=self._settings.candle_interval_seconds,
            tz=self._tz,
        )

    def compose(self, state: ExchangeState) -> ExchangeViews:
        """All four views for one snapshot."""
        return ExchangeViews(
            my_open_orders=self.my_open_orders(state),
            trade_history=self.trade_history(state),
            order_book=self.order_book(state),
            price_chart=self.price_chart(state),
        )

    def _open_orders(self, state: ExchangeState) -> list[Order]:
        conflicts = conflicting_ids(state.filled_orders, state.cancelled_orders)
        if conflicts:
            logger.warning(
                "order_state_conflict",
                order_ids=sorted(conflicts),
                detail="id is both filled and cancelled; excluded from open orders",
            )
        return open_orders(state.all_orders, state.filled_orders, state.cancelled_orders)

    def _decorate(self, order: Order, pair: TokenPair) -> DecoratedOrder:
        return decorate_order(
            order,
            pair,
            precision=self._settings.price_precision,
            tz=self._tz,
        )
