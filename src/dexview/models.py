"""Data models for order events and the views derived from them.

CRITICAL: Token amounts are integers in the token's smallest unit and prices
are Decimal. Never use float for amounts or prices.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from dexview.exceptions import InvalidOrderError

GREEN = "#25CE8F"
RED = "#F45353"

#: Fractional digits of an ERC-20 token unless told otherwise.
DEFAULT_DECIMALS = 18

#: Decimal places kept in a token price.
PRICE_PRECISION = 5


class OrderSide(str, Enum):
    """Order direction relative to the base token (token0)."""

    BUY = "buy"
    SELL = "sell"


class PriceChange(str, Enum):
    """Direction of the latest trade price against the one before it."""

    UP = "+"
    DOWN = "-"


def _parse_int(args: Mapping[str, Any], key: str) -> int:
    """Read an integer field from event args, accepting decimal strings."""
    if key not in args:
        raise InvalidOrderError(f"order event missing field {key!r}")
    value = args[key]
    if isinstance(value, bool):
        raise InvalidOrderError(f"order field {key!r} is not an integer: {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value), 10)
    except ValueError as e:
        raise InvalidOrderError(f"order field {key!r} is not an integer: {value!r}") from e


def _parse_str(args: Mapping[str, Any], key: str) -> str:
    if key not in args or args[key] is None:
        raise InvalidOrderError(f"order event missing field {key!r}")
    return str(args[key])


@dataclass(frozen=True)
class Order:
    """A single order as emitted by the exchange contract."""

    id: int | str
    user: str
    token_get: str
    amount_get: int  # smallest unit of token_get
    token_give: str
    amount_give: int  # smallest unit of token_give
    timestamp: int  # Unix seconds

    @property
    def id_key(self) -> str:
        """Textual id used for every id comparison."""
        return str(self.id)

    @classmethod
    def from_event(cls, args: Mapping[str, Any]) -> "Order":
        """Build an Order from Order/Trade/Cancel event arguments.

        Args:
            args: Event argument mapping with camelCase keys (``id``,
                ``user``, ``tokenGet``, ``amountGet``, ``tokenGive``,
                ``amountGive``, ``timestamp``). Numeric values may be ints
                or base-10 strings (big-number ``toString()`` output).

        Returns:
            The parsed Order.

        Raises:
            InvalidOrderError: If a field is missing or not an integer.
        """
        if "id" not in args or args["id"] is None:
            raise InvalidOrderError("order event missing field 'id'")
        return cls(
            id=args["id"],
            user=_parse_str(args, "user"),
            token_get=_parse_str(args, "tokenGet"),
            amount_get=_parse_int(args, "amountGet"),
            token_give=_parse_str(args, "tokenGive"),
            amount_give=_parse_int(args, "amountGive"),
            timestamp=_parse_int(args, "timestamp"),
        )


@dataclass(frozen=True)
class Token:
    """A selected ERC-20 token."""

    address: str
    symbol: str = ""
    decimals: int = DEFAULT_DECIMALS


@dataclass(frozen=True)
class TokenPair:
    """The active market: token0 is priced in units of token1."""

    token0: Token  # base
    token1: Token  # quote

    @classmethod
    def from_selection(cls, tokens: Sequence[Token | None]) -> "TokenPair | None":
        """Return the pair for a token selection, or None while incomplete."""
        if len(tokens) < 2 or tokens[0] is None or tokens[1] is None:
            return None
        return cls(token0=tokens[0], token1=tokens[1])

    @property
    def addresses(self) -> tuple[str, str]:
        return (self.token0.address, self.token1.address)

    def contains(self, order: Order) -> bool:
        """True when the order trades only between the two pair tokens."""
        addresses = self.addresses
        return order.token_get in addresses and order.token_give in addresses


@dataclass(frozen=True)
class ExchangeState:
    """Snapshot of everything the views are derived from."""

    all_orders: Sequence[Order] = ()
    filled_orders: Sequence[Order] = ()
    cancelled_orders: Sequence[Order] = ()
    account: str | None = None
    tokens: tuple[Token | None, ...] = ()

    @property
    def pair(self) -> TokenPair | None:
        return TokenPair.from_selection(self.tokens)


@dataclass(frozen=True)
class DecoratedOrder(Order):
    """An Order enriched with pricing and display fields.

    The view-specific fields stay None unless the view that needs them
    filled them in.
    """

    token0_amount: str = "0.0"
    token1_amount: str = "0.0"
    token_price: Decimal | None = None  # None when token0 amount is zero
    formatted_timestamp: str = ""
    order_type: OrderSide | None = None
    order_type_class: str | None = None
    order_fill_action: OrderSide | None = None
    token_price_class: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Render with the camelCase keys used by the presentation layer."""
        data: dict[str, Any] = {
            "id": self.id,
            "user": self.user,
            "tokenGet": self.token_get,
            "amountGet": self.amount_get,
            "tokenGive": self.token_give,
            "amountGive": self.amount_give,
            "timestamp": self.timestamp,
            "token0Amount": self.token0_amount,
            "token1Amount": self.token1_amount,
            "tokenPrice": self.token_price,
            "formattedTimestamp": self.formatted_timestamp,
        }
        if self.order_type is not None:
            data["orderType"] = self.order_type.value
            data["orderTypeClass"] = self.order_type_class
        if self.order_fill_action is not None:
            data["orderFillAction"] = self.order_fill_action.value
        if self.token_price_class is not None:
            data["tokenPriceClass"] = self.token_price_class
        return data


@dataclass(frozen=True)
class Candle:
    """OHLC summary of trade prices within one time bucket."""

    start: datetime  # timezone-aware bucket start
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal

    @property
    def timestamp(self) -> int:
        """Bucket start in Unix seconds."""
        return int(self.start.timestamp())

    def as_dict(self) -> dict[str, Any]:
        """Render as a candlestick chart point."""
        return {"x": self.start, "y": [self.open, self.high, self.low, self.close]}


@dataclass(frozen=True)
class OrderBook:
    """Open orders split by side, each side sorted by price descending."""

    buy: tuple[DecoratedOrder, ...] = ()
    sell: tuple[DecoratedOrder, ...] = ()

    @property
    def buy_orders(self) -> tuple[DecoratedOrder, ...]:
        """Alias of ``buy``."""
        return self.buy

    @property
    def sell_orders(self) -> tuple[DecoratedOrder, ...]:
        """Alias of ``sell``."""
        return self.sell

    def as_dict(self) -> dict[str, Any]:
        buy = [o.as_dict() for o in self.buy]
        sell = [o.as_dict() for o in self.sell]
        return {"buy": buy, "sell": sell, "buyOrders": buy, "sellOrders": sell}


@dataclass(frozen=True)
class PriceChart:
    """Candles for the active pair plus the latest price movement."""

    last_price: Decimal = Decimal("0")
    second_last_price: Decimal = Decimal("0")
    last_price_change: PriceChange = PriceChange.DOWN
    candles: tuple[Candle, ...] = field(default_factory=tuple)

    @property
    def series(self) -> list[dict[str, tuple[Candle, ...]]]:
        return [{"data": self.candles}]

    def as_dict(self) -> dict[str, Any]:
        return {
            "lastPrice": self.last_price,
            "lastPriceChange": self.last_price_change.value,
            "series": [{"data": [c.as_dict() for c in self.candles]}],
        }


@dataclass(frozen=True)
class ExchangeViews:
    """All four views for one state snapshot. None means no pair selected."""

    my_open_orders: tuple[DecoratedOrder, ...] | None = None
    trade_history: tuple[DecoratedOrder, ...] | None = None
    order_book: OrderBook | None = None
    price_chart: PriceChart | None = None
