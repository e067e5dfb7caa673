"""OHLC candle aggregation of filled trades for the price chart.

Trades are bucketed by the start of the interval containing their
timestamp. Within a bucket, open and close follow arrival order, so the
input must already be sorted ascending by timestamp.

Bucket boundaries are computed in a configurable timezone (UTC by
default). For whole-hour offsets this makes no difference to hourly
candles; for zones such as Asia/Kolkata (+05:30) it shifts them.

CRITICAL: All prices are Decimal. Never use float.
"""

from collections.abc import Sequence
from datetime import timezone, tzinfo
from decimal import Decimal

from dexview.logging import get_logger
from dexview.models import Candle, DecoratedOrder, PriceChange, PriceChart
from dexview.timeutils import from_unix

logger = get_logger(__name__)

#: Default candle width: one hour.
HOUR_SECONDS = 3600


def bucket_start(
    timestamp: int,
    interval_seconds: int = HOUR_SECONDS,
    tz: tzinfo = timezone.utc,
) -> int:
    """Truncate a Unix timestamp to the start of its interval in ``tz``.

    Args:
        timestamp: Unix seconds.
        interval_seconds: Bucket width.
        tz: Timezone whose wall clock defines the boundaries.

    Returns:
        Unix seconds of the bucket start.
    """
    offset = from_unix(timestamp, tz).utcoffset()
    offset_seconds = int(offset.total_seconds()) if offset is not None else 0
    local = timestamp + offset_seconds
    return local - local % interval_seconds - offset_seconds


def _reduce_bucket(start: int, prices: list[Decimal], tz: tzinfo) -> Candle:
    # max/min return the first of equal values
    return Candle(
        start=from_unix(start, tz),
        open=prices[0],
        high=max(prices),
        low=min(prices),
        close=prices[-1],
    )


def build_candles(
    orders: Sequence[DecoratedOrder],
    interval_seconds: int = HOUR_SECONDS,
    tz: tzinfo = timezone.utc,
) -> list[Candle]:
    """Reduce priced trades to one OHLC candle per populated bucket.

    Args:
        orders: Decorated filled orders sorted ascending by timestamp.
        interval_seconds: Bucket width in seconds.
        tz: Timezone for bucket boundaries.

    Returns:
        Candles sorted by bucket start ascending. Empty buckets are not
        filled in. Orders without a price are skipped.
    """
    buckets: dict[int, list[Decimal]] = {}
    skipped = 0
    for order in orders:
        if order.token_price is None:
            skipped += 1
            continue
        key = bucket_start(order.timestamp, interval_seconds, tz)
        buckets.setdefault(key, []).append(order.token_price)

    if skipped:
        logger.warning("candle_orders_skipped", reason="undefined_price", count=skipped)

    return [_reduce_bucket(start, buckets[start], tz) for start in sorted(buckets)]


def last_prices(
    orders: Sequence[DecoratedOrder],
) -> tuple[Decimal, Decimal, PriceChange]:
    """Latest and previous trade prices and the direction between them.

    Args:
        orders: Decorated filled orders sorted ascending by timestamp.

    Returns:
        ``(last_price, second_last_price, change)``. With fewer than two
        priced orders there is no movement to report: ``(0, 0, DOWN)``.
    """
    prices = [o.token_price for o in orders if o.token_price is not None]
    if len(prices) < 2:
        return Decimal("0"), Decimal("0"), PriceChange.DOWN

    second_last, last = prices[-2], prices[-1]
    change = PriceChange.UP if last >= second_last else PriceChange.DOWN
    return last, second_last, change


def build_price_chart(
    orders: Sequence[DecoratedOrder],
    interval_seconds: int = HOUR_SECONDS,
    tz: tzinfo = timezone.utc,
) -> PriceChart:
    """Candles plus last-price summary for chronologically sorted trades."""
    last, second_last, change = last_prices(orders)
    return PriceChart(
        last_price=last,
        second_last_price=second_last,
        last_price_change=change,
        candles=tuple(build_candles(orders, interval_seconds, tz)),
    )
