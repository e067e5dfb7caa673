"""Buy/sell classification of orders relative to the base token."""

from dexview.models import GREEN, RED, Order, OrderSide, TokenPair


def assign_side(order: Order, pair: TokenPair) -> OrderSide:
    """BUY when the order gives the quote token to acquire the base token."""
    if order.token_give == pair.token1.address:
        return OrderSide.BUY
    return OrderSide.SELL


def fill_action(side: OrderSide) -> OrderSide:
    """The side a counterparty takes to fill an order on ``side``."""
    return OrderSide.SELL if side == OrderSide.BUY else OrderSide.BUY


def side_color(side: OrderSide, buy_color: str = GREEN, sell_color: str = RED) -> str:
    return buy_color if side == OrderSide.BUY else sell_color
