"""Matching of lend and borrow orders by overlapping VTL ranges."""

from __future__ import annotations

from bisect import bisect_right
from typing import Optional

from lendbook.order import Order, OrderBook, OrderStatus


def _first_min_above(book: OrderBook, bound) -> int:
    return bisect_right(book.orders_by_vtl, bound, key=lambda o: o.vtl_range.low)


def _overlaps(order: Order, low, high) -> bool:
    lower = max(order.vtl_range.low, low)
    upper = min(order.vtl_range.high, high)
    return lower <= upper


def match_lend(borrow_orderbook: OrderBook, lend_order: Order) -> Optional[Order]:
    """Find the first open borrow order above the lend minimum whose range overlaps."""
    low = lend_order.vtl_range.low
    high = lend_order.vtl_range.high
    start = _first_min_above(borrow_orderbook, low)
    return next(
        (
            o
            for o in borrow_orderbook.orders_by_vtl[start:]
            if o.status == OrderStatus.OPEN and _overlaps(o, low, high)
        ),
        None,
    )


def match_borrow(lend_orderbook: OrderBook, borrow_order: Order) -> Optional[Order]:
    """Check the lend order just at or below the borrow minimum for an overlap."""
    low = borrow_order.vtl_range.low
    high = borrow_order.vtl_range.high
    idx = _first_min_above(lend_orderbook, low)
    if idx == 0:
        return None
    candidate = lend_orderbook.orders_by_vtl[idx - 1]
    if candidate.status != OrderStatus.OPEN:
        return None
    if not _overlaps(candidate, low, high):
        return None
    return candidate