# lendbook

Order books for a lending market. Lenders and borrowers each post an order
that gives the range of value-to-loan (VTL) ratios they accept. The package
finds, for a new order, a match in the other side's book whose range
overlaps.

VTL bounds are exact fractions, so comparisons carry no rounding error.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Building blocks

### `lendbook.rational`

- `Rational(num, den)` is a fraction kept in lowest terms, with the sign on
  the numerator. Numerator and denominator are 64-bit signed integers; a zero
  denominator or a value outside that range raises `InvalidValueError` (a
  subclass of `ValueError`). Instances are immutable and hashable.
- `Rational.from_decimal_str("-12.34")` parses a decimal string, with
  surrounding whitespace allowed. Malformed input raises `InvalidValueError`;
  a value too large for 64 bits raises `OverflowError`.
- `a - b` and `a.checked_sub(b)` subtract exactly, raising `OverflowError`
  if an intermediate product leaves the 64-bit range. Comparisons are exact
  and raise `OverflowError` in the same case.
- `str()` gives the integer for whole values and a plain decimal rendering
  (through a float) otherwise, e.g. `"0.6"`.

### `lendbook.interval`

- `Interval(low, high)` is a closed range with attributes `low` and `high`.
  If `low` is above `high`, `InvalidValueError` is raised.
- `Interval.from_decimal_strs(min_s, max_s)` builds a range of `Rational`
  bounds from decimal strings.
- `Interval.from_ints(low, high)` and `Interval.from_int_strs(min_s, max_s)`
  build a range of unsigned 128-bit integers; other values raise
  `InvalidValueError`.
- Intervals compare by `low` first, then by `high`.

### `lendbook.order`

- `OrderType` (`LEND`, `BORROW`) and `OrderStatus` (`OPEN`,
  `PARTIALLY_FILLED`, `FILLED`, `EXPIRED`) are enums.
- `Order.create(order_id, order_type, asset, collateral, amount, vtl_range)`
  makes an `OPEN` order whose `remaining_amount` equals `amount`. An
  `order_id` or `asset` longer than 32 bytes in UTF-8 raises
  `InvalidValueError`.
- `OrderBook` keeps `orders_by_vtl`, a list sorted by VTL range with the
  order id breaking ties, and `orders_by_id`, a dict keyed by id.
  - `add_order(order)` inserts into both. A book holds at most 16 orders;
    adding to a full book raises `OrderBookFullError`.
  - `get_order_by_id(order_id)` returns the order or `None`.
  - `remove_order(order_id)` removes the order from the id index only (the
    VTL list is left as it is) and returns it, or `None` if it was absent.
    The last id in the index takes the removed one's place in its order.
  - `iter_orders_by_vtl()` and `iter_orders_by_id()` iterate over a snapshot
    of each index.
  - `str()` lists the orders by VTL and the ids by index order.
- `MarketOrderBooks` pairs a `lender_book` with a `borrower_book`, both empty
  by default.

## Matching

```python
from lendbook.interval import Interval
from lendbook.order import Order, OrderBook, OrderType
from lendbook.matching import match_lend, match_borrow

borrowers = OrderBook()
borrowers.add_order(Order.create(
    "b1", OrderType.BORROW, "DOT", 1_000, 500,
    Interval.from_decimal_strs("0.6", "0.8"),
))

lend = Order.create(
    "l1", OrderType.LEND, "DOT", 0, 500,
    Interval.from_decimal_strs("0.5", "0.7"),
)
print(match_lend(borrowers, lend))
# Order { id: b1, type: BORROW, status: OPEN, asset: DOT, amount: 500, remaining: 500, vtl: [0.6-0.8] }
```

`match_lend(borrow_orderbook, lend_order)` walks the borrow book in VTL
order, starting at the first order whose lower bound is strictly above the
lend order's lower bound, and returns the first `OPEN` order whose range
overlaps the lend order's range.

`match_borrow(lend_orderbook, borrow_order)` takes the last lend order, in
VTL order, whose lower bound is not above the borrow order's lower bound. It
returns that order if it is `OPEN` and its range overlaps the borrow order's
range.

Both return `None` when nothing matches.

## Contract entry point

`lendbook.contract` holds the call handler of the contract:

- `call(call_data)` takes ABI-encoded call data (a 4-byte selector, then a
  32-byte big-endian word), reads the unsigned 32-bit integer at byte offset
  32 (missing bytes count as zero) and returns `fibonacci(n)` as a 32-byte
  big-endian word.
- `fibonacci(n)` returns the n-th Fibonacci number wrapped to 32 bits; an
  argument that is not an unsigned 32-bit integer raises
  `InvalidValueError`.
- `deploy()` is the constructor and does nothing.

## What it does not do

- Matching only finds a counterpart: it does not fill orders, change their
  status or remaining amount, or move funds.
- Books live in memory only; there is no storage and no command-line tool.
- `call` works on bytes handed to it; there is no runtime that delivers call
  data or sends the result back.