"""Closed intervals ordered lexicographically by their bounds."""

from __future__ import annotations

import re
from functools import total_ordering
from typing import Any, Generic, TypeVar

from lendbook.rational import InvalidValueError, Rational

T = TypeVar("T")

U128_MAX = 2**128 - 1

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def _parse_u128(text: str, message: str) -> int:
    if not _UNSIGNED_INT.fullmatch(text):
        raise InvalidValueError(message)
    value = int(text)
    if value > U128_MAX:
        raise InvalidValueError(message)
    return value


def _check_u128(value: int, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U128_MAX:
        raise InvalidValueError(message)
    return value


@total_ordering
class Interval(Generic[T]):
    """An interval [low, high] with low <= high."""

    __slots__ = ("low", "high")

    low: Any
    high: Any

    def __init__(self, low: T, high: T) -> None:
        if not low <= high:
            raise InvalidValueError("min must be ≤ max")
        self.low = low
        self.high = high

    @classmethod
    def from_decimal_strs(cls, min_s: str, max_s: str) -> Interval[Rational]:
        """Build a rational interval from two decimal strings."""
        return cls(Rational.from_decimal_str(min_s), Rational.from_decimal_str(max_s))

    @classmethod
    def from_ints(cls, low: int, high: int) -> Interval[int]:
        """Build an interval of unsigned 128-bit integers."""
        return cls(
            _check_u128(low, "invalid min integer"),
            _check_u128(high, "invalid max integer"),
        )

    @classmethod
    def from_int_strs(cls, min_s: str, max_s: str) -> Interval[int]:
        """Parse an interval of unsigned 128-bit integers from strings."""
        return cls(
            _parse_u128(min_s, "invalid min integer"),
            _parse_u128(max_s, "invalid max integer"),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.low == other.low and self.high == other.high

    def __hash__(self) -> int:
        return hash((self.low, self.high))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        if self.low != other.low:
            return self.low < other.low
        return self.high < other.high

    def __repr__(self) -> str:
        return f"Interval({self.low!r}, {self.high!r})"