"""Exact fractions over signed 64-bit integers with decimal-string parsing."""

from __future__ import annotations

import re
from decimal import Decimal
from functools import total_ordering
from math import gcd

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")


class InvalidValueError(ValueError):
    """Raised when a value cannot be constructed or parsed."""


def _in_i64(value: int) -> bool:
    return I64_MIN <= value <= I64_MAX


def _parse_i64(text: str, message: str) -> int:
    if not _SIGNED_INT.fullmatch(text):
        raise InvalidValueError(message)
    value = int(text)
    if not _in_i64(value):
        raise InvalidValueError(message)
    return value


def _checked(value: int, message: str) -> int:
    if not _in_i64(value):
        raise OverflowError(message)
    return value


def _format_float(value: float) -> str:
    """Render a float as plain decimal digits, without exponent or trailing '.0'."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@total_ordering
class Rational:
    """A reduced fraction whose sign always sits on the numerator."""

    __slots__ = ("num", "den")

    num: int
    den: int

    def __init__(self, num: int, den: int) -> None:
        if not (_in_i64(num) and _in_i64(den)):
            raise InvalidValueError("Value out of 64-bit range")
        if den == 0:
            raise InvalidValueError("Denominator cannot be zero")
        sign = -1 if den < 0 else 1
        divisor = gcd(num, den)
        object.__setattr__(self, "num", sign * (num // divisor))
        object.__setattr__(self, "den", abs(den) // divisor)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Rational is immutable")

    @classmethod
    def from_decimal_str(cls, s: str) -> Rational:
        """Parse a decimal string such as "-12.34" or "7"."""
        s = s.strip()
        int_part, dot, frac = s.partition(".")
        if not dot:
            return cls(_parse_i64(s, "Invalid integer"), 1)
        base = 10 ** len(frac)
        if not _in_i64(base):
            raise OverflowError("Fractional part too long")
        int_val = _parse_i64(int_part, "Invalid integer part")
        frac_val = _parse_i64(frac, "Invalid fractional part")
        sign = -1 if int_val < 0 else 1
        numerator = _checked(abs(int_val) * base + frac_val, "Overflow computing numerator")
        return cls(sign * numerator, base)

    def checked_sub(self, rhs: Rational) -> Rational:
        """Subtract, raising OverflowError if an intermediate leaves 64-bit range."""
        ad = _checked(self.num * rhs.den, "Overflow computing numerator")
        cb = _checked(rhs.num * self.den, "Overflow computing numerator")
        num = _checked(ad - cb, "Overflow computing numerator")
        den = _checked(self.den * rhs.den, "Overflow computing denominator")
        return Rational(num, den)

    def __sub__(self, other: object) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.checked_sub(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.num == other.num and self.den == other.den

    def __hash__(self) -> int:
        return hash((self.num, self.den))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        left = self.num * other.den
        right = other.num * self.den
        if not (_in_i64(left) and _in_i64(right)):
            raise OverflowError("overflow in Rational comparison")
        return left < right

    def __str__(self) -> str:
        if self.den == 1:
            return str(self.num)
        return _format_float(self.num / self.den)

    def __repr__(self) -> str:
        return f"Rational({self.num}, {self.den})"