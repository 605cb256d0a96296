import pytest

from lendbook.interval import Interval
from lendbook.order import (
    MarketOrderBooks,
    Order,
    OrderBook,
    OrderBookFullError,
    OrderStatus,
    OrderType,
)
from lendbook.rational import InvalidValueError


def make(order_id, low="0.1", high="0.5", kind=OrderType.LEND, amount=100):
    return Order.create(order_id, kind, "DOT", 10, amount, Interval.from_decimal_strs(low, high))


def test_create_sets_open_and_remaining():
    order = make("o1", amount=250)
    assert order.status == OrderStatus.OPEN
    assert order.remaining_amount == 250
    assert order.amount == 250
    assert order.collateral == 10


def test_create_rejects_long_id():
    with pytest.raises(InvalidValueError, match="order_id too long"):
        make("x" * 33)


def test_create_accepts_id_at_capacity():
    assert make("x" * 32).order_id == "x" * 32


def test_create_measures_bytes_not_characters():
    with pytest.raises(InvalidValueError, match="order_id too long"):
        make("é" * 17)


def test_create_rejects_long_asset():
    with pytest.raises(InvalidValueError, match="asset too long"):
        Order.create("o1", OrderType.BORROW, "A" * 33, 0, 1, Interval.from_decimal_strs("1", "2"))


def test_order_str_format():
    order = make("o1", "0.5", "2")
    assert str(order) == (
        "Order { id: o1, type: LEND, status: OPEN, asset: DOT, "
        "amount: 100, remaining: 100, vtl: [0.5-2] }"
    )


def test_add_order_keeps_vtl_sorted():
    book = OrderBook()
    for oid, low, high in [("c", "0.3", "0.4"), ("a", "0.1", "0.9"), ("b", "0.1", "0.2"), ("d", "0.1", "0.2")]:
        book.add_order(make(oid, low, high))
    ids = [o.order_id for o in book.iter_orders_by_vtl()]
    assert ids == ["b", "d", "a", "c"]
    assert [o.order_id for o in book.iter_orders_by_id()] == ["c", "a", "b", "d"]


def test_get_order_by_id():
    book = OrderBook()
    order = make("o1")
    book.add_order(order)
    assert book.get_order_by_id("o1") is order
    assert book.get_order_by_id("missing") is None


def test_book_full_after_sixteen_orders():
    book = OrderBook()
    for i in range(16):
        book.add_order(make(f"o{i}"))
    with pytest.raises(OrderBookFullError):
        book.add_order(make("extra"))
    assert len(book.orders_by_vtl) == 16


def test_remove_order_moves_last_key_into_slot():
    book = OrderBook()
    for oid in ["a", "b", "c", "d"]:
        book.add_order(make(oid))
    removed = book.remove_order("b")
    assert removed.order_id == "b"
    assert list(book.orders_by_id) == ["a", "d", "c"]
    assert len(book.orders_by_vtl) == 4


def test_remove_missing_returns_none():
    book = OrderBook()
    book.add_order(make("a"))
    assert book.remove_order("zz") is None
    assert list(book.orders_by_id) == ["a"]


def test_book_str():
    book = OrderBook()
    book.add_order(make("b", "0.5", "1"))
    book.add_order(make("a", "0.25", "3"))
    assert str(book) == "by_vtl     [a(0.25-3), b(0.5-1)]\nby_id      [b, a]"


def test_empty_book_str():
    assert str(OrderBook()) == "by_vtl     []\nby_id      []"


def test_market_books_are_independent():
    market = MarketOrderBooks()
    market.lender_book.add_order(make("l1"))
    assert list(market.lender_book.orders_by_id) == ["l1"]
    assert list(market.borrower_book.orders_by_id) == []