"""Token amount scaling and unit price derivation for two-token swaps.

An order swaps ``amount_give`` of ``token_give`` for ``amount_get`` of
``token_get``. Whichever way it flows, the token0 quantity is the base and
the token1 quantity is the quote, and the price is quote per base.

CRITICAL: Amounts stay integers until formatted; prices use Decimal with a
widened context. Never use float.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from dexview.logging import get_logger
from dexview.models import PRICE_PRECISION, Order, TokenPair

logger = get_logger(__name__)

#: Minimum context precision for price division.
_PRICE_CONTEXT_PREC = 80


def _price_context_prec(
    token0_units: int,
    token1_units: int,
    token0_decimals: int,
    token1_decimals: int,
    precision: int,
) -> int:
    """Digits needed to scale, divide and quantize without overflowing the context.

    The quotient has at most len(token1) + token0_decimals integer digits and
    keeps ``precision`` fractional ones, so any uint256 pair fits.
    """
    needed = (
        len(str(abs(token0_units)))
        + len(str(abs(token1_units)))
        + token0_decimals
        + token1_decimals
        + precision
    )
    return max(_PRICE_CONTEXT_PREC, needed)


@dataclass(frozen=True)
class PriceQuote:
    """Base and quote quantities of one order and the derived unit price."""

    token0_amount: str
    token1_amount: str
    token_price: Decimal | None


def format_units(value: int, decimals: int) -> str:
    """Format an integer amount of smallest units as a decimal string.

    Exact integer arithmetic; trailing fractional zeros are stripped but at
    least one fractional digit is kept.

    Examples:
        >>> format_units(100 * 10**18, 18)
        '100.0'
        >>> format_units(15 * 10**17, 18)
        '1.5'
    """
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**decimals)
    if decimals == 0:
        return f"{sign}{whole}.0"
    digits = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{digits}"


def compute_token_price(
    token0_units: int,
    token1_units: int,
    token0_decimals: int,
    token1_decimals: int,
    precision: int = PRICE_PRECISION,
) -> Decimal | None:
    """Compute token1 per token0, rounded half-up to ``precision`` places.

    Args:
        token0_units: Base token amount in smallest units.
        token1_units: Quote token amount in smallest units.
        token0_decimals: Fractional digits of the base token.
        token1_decimals: Fractional digits of the quote token.
        precision: Decimal places kept in the result.

    Returns:
        The rounded price, or None when the base amount is zero.
    """
    if token0_units == 0:
        return None

    with localcontext() as ctx:
        ctx.prec = _price_context_prec(
            token0_units, token1_units, token0_decimals, token1_decimals, precision
        )
        base = Decimal(token0_units).scaleb(-token0_decimals)
        quote = Decimal(token1_units).scaleb(-token1_decimals)
        return (quote / base).quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)


def normalize(order: Order, pair: TokenPair, precision: int = PRICE_PRECISION) -> PriceQuote:
    """Split an order into base/quote quantities and price it.

    If the order gives token0 it wants token1, so the given amount is the
    base quantity. Otherwise the order gives token1 and the wanted amount
    is the base quantity.

    Args:
        order: The order to price.
        pair: The active token pair.
        precision: Decimal places kept in the price.

    Returns:
        PriceQuote with human-scaled amounts and the price. The price is
        None (logged as ``zero_base_amount``) when the base amount is zero.
    """
    if order.token_give == pair.token0.address:
        token0_units, token1_units = order.amount_give, order.amount_get
    else:
        token0_units, token1_units = order.amount_get, order.amount_give

    price = compute_token_price(
        token0_units,
        token1_units,
        pair.token0.decimals,
        pair.token1.decimals,
        precision=precision,
    )
    if price is None:
        logger.warning("zero_base_amount", order_id=order.id_key, user=order.user)

    return PriceQuote(
        token0_amount=format_units(token0_units, pair.token0.decimals),
        token1_amount=format_units(token1_units, pair.token1.decimals),
        token_price=price,
    )
