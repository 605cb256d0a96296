"""Orders and order books kept sorted by their VTL range."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from lendbook.interval import Interval
from lendbook.rational import InvalidValueError

MAX_ORDERS = 32
MAX_KEYS = 16
STR_CAP = 32


class OrderType(Enum):
    """Side of an order."""

    LEND = "LEND"
    BORROW = "BORROW"


class OrderStatus(Enum):
    """Lifecycle state of an order."""

    OPEN = "OPEN"
    PARTIALLY_FILLED = "PARTIALLY_FILLED"
    FILLED = "FILLED"
    EXPIRED = "EXPIRED"


class OrderBookFullError(RuntimeError):
    """Raised when an order book has no room for another order."""


def _small_str(value: str, message: str) -> str:
    if len(value.encode("utf-8")) > STR_CAP:
        raise InvalidValueError(message)
    return value


@dataclass
class Order:
    """A lend or borrow order over a VTL range."""

    order_id: str
    order_type: OrderType
    status: OrderStatus
    asset: str
    collateral: int
    amount: int
    remaining_amount: int
    vtl_range: Interval

    @classmethod
    def create(
        cls,
        order_id: str,
        order_type: OrderType,
        asset: str,
        collateral: int,
        amount: int,
        vtl_range: Interval,
    ) -> Order:
        """Build an open order with its full amount remaining."""
        return cls(
            order_id=_small_str(order_id, "order_id too long"),
            order_type=order_type,
            status=OrderStatus.OPEN,
            asset=_small_str(asset, "asset too long"),
            collateral=collateral,
            amount=amount,
            remaining_amount=amount,
            vtl_range=vtl_range,
        )

    def __str__(self) -> str:
        return (
            f"Order {{ id: {self.order_id}, type: {self.order_type.name}, "
            f"status: {self.status.name}, asset: {self.asset}, amount: {self.amount}, "
            f"remaining: {self.remaining_amount}, "
            f"vtl: [{self.vtl_range.low}-{self.vtl_range.high}] }}"
        )


def _vtl_key(order: Order) -> tuple:
    return (order.vtl_range, order.order_id)


class OrderBook:
    """Orders indexed both by VTL range (sorted) and by identifier."""

    def __init__(self) -> None:
        self.orders_by_vtl: list[Order] = []
        self.orders_by_id: dict[str, Order] = {}

    def iter_orders_by_id(self) -> Iterator[Order]:
        return iter(list(self.orders_by_id.values()))

    def iter_orders_by_vtl(self) -> Iterator[Order]:
        return iter(list(self.orders_by_vtl))

    def get_order_by_id(self, order_id: str) -> Optional[Order]:
        return self.orders_by_id.get(order_id)

    def add_order(self, order: Order) -> None:
        """Insert an order, keeping the VTL list sorted by range then identifier."""
        if len(self.orders_by_vtl) == MAX_KEYS or len(self.orders_by_id) == MAX_KEYS:
            raise OrderBookFullError("order book full")
        idx = bisect_left(self.orders_by_vtl, _vtl_key(order), key=_vtl_key)
        self.orders_by_vtl.insert(idx, order)
        self.orders_by_id[order.order_id] = order

    def remove_order(self, order_id: str) -> Optional[Order]:
        """Remove an order from the identifier index; the last key takes its slot."""
        if order_id not in self.orders_by_id:
            return None
        items = list(self.orders_by_id.items())
        idx = next(i for i, (key, _) in enumerate(items) if key == order_id)
        removed = items[idx][1]
        last = items.pop()
        if idx < len(items):
            items[idx] = last
        self.orders_by_id = dict(items)
        return removed

    def __str__(self) -> str:
        by_vtl = ", ".join(
            f"{o.order_id}({o.vtl_range.low}-{o.vtl_range.high})" for o in self.orders_by_vtl
        )
        by_id = ", ".join(self.orders_by_id)
        return f"by_vtl     [{by_vtl}]\nby_id      [{by_id}]"


@dataclass
class MarketOrderBooks:
    """The lender and borrower books of one market."""

    lender_book: OrderBook = field(default_factory=OrderBook)
    borrower_book: OrderBook = field(default_factory=OrderBook)