"""Contract entry points answering `fibonacci(uint32) returns (uint32)` calls."""

from __future__ import annotations

from lendbook.rational import InvalidValueError

U32_MAX = 2**32 - 1
_ARG_OFFSET = 32
_ARG_SIZE = 4
_WORD_SIZE = 32


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, wrapped to 32 bits."""
    if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n <= U32_MAX:
        raise InvalidValueError("n must be an unsigned 32-bit integer")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, (current + following) & U32_MAX
    return current


def deploy() -> None:
    """Constructor run once per contract; it has nothing to set up."""


def call(call_data: bytes) -> bytes:
    """Decode the ABI argument, compute Fibonacci and return a 32-byte word."""
    chunk = bytes(call_data[_ARG_OFFSET:_ARG_OFFSET + _ARG_SIZE])
    chunk = chunk.ljust(_ARG_SIZE, b"\x00")
    n = int.from_bytes(chunk, "big")
    return fibonacci(n).to_bytes(_WORD_SIZE, "big")