"""Display-ready trading views derived from on-chain order events.

Classifies orders as open, filled or cancelled, prices two-token swaps,
and aggregates them into the my-open-orders, trade-history, order-book
and price-chart views of a decentralized exchange UI.
"""

from dexview.config import AppSettings, ViewSettings
from dexview.exceptions import DexViewError, InvalidOrderError
from dexview.models import (
    Candle,
    DecoratedOrder,
    ExchangeState,
    ExchangeViews,
    Order,
    OrderBook,
    OrderSide,
    PriceChange,
    PriceChart,
    Token,
    TokenPair,
)
from dexview.views import ViewComposer, ViewSelector, filter_by_pair

__all__ = [
    "AppSettings",
    "Candle",
    "DecoratedOrder",
    "DexViewError",
    "ExchangeState",
    "ExchangeViews",
    "InvalidOrderError",
    "Order",
    "OrderBook",
    "OrderSide",
    "PriceChange",
    "PriceChart",
    "Token",
    "TokenPair",
    "ViewComposer",
    "ViewSelector",
    "ViewSettings",
    "filter_by_pair",
]
