"""Number routines: Pascal's triangle, powers, lattice paths and digit tricks."""

from __future__ import annotations

import math

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def pascal_row(row: int) -> list[int]:
    """Return the ``row``-th row of Pascal's triangle, counting from 1."""
    if row < 1:
        raise ValueError("row must be at least 1")
    values = [1]
    current = 1
    for col in range(1, row):
        current = current * (row - col) // col
        values.append(current)
    return values


def generate_pascal(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    return [pascal_row(row) for row in range(1, num_rows + 1)]


def power(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    remaining = abs(n)
    base = float(x)
    result = 1.0
    while remaining:
        if remaining % 2:
            result *= base
            remaining -= 1
        else:
            base *= base
            remaining //= 2
    return 1.0 / result if n < 0 else result


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be at least 1")
    return math.comb(m + n - 2, m - 1)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Results outside the signed 32-bit range give 0.
    """
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= reversed_value <= _INT32_MAX:
        return 0
    return reversed_value


def sum_of_three(num: int) -> list[int]:
    """Return three consecutive integers summing to ``num``, or an empty list."""
    if num % 3:
        return []
    middle = num // 3
    return [middle - 1, middle, middle + 1]