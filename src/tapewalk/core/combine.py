"""Combine per-token cycle lengths into one synchronized period."""

from __future__ import annotations

from collections.abc import Iterable

from tapewalk.core.errors import EmptyInputError


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def combine(lengths: Iterable[int]) -> int:
    """Return the least common multiple of ``lengths``.

    The multiple is built incrementally, dividing by the running GCD at
    each step, so no intermediate value exceeds ``result * length``.

    Raises:
        EmptyInputError: ``lengths`` is empty.
        ValueError: A length is not a positive integer.
    """
    values = list(lengths)
    if not values:
        raise EmptyInputError()
    for value in values:
        if value <= 0:
            raise ValueError(f"Cycle lengths must be positive, got {value}")

    result = values[0]
    for value in values[1:]:
        result = result // gcd(result, value) * value
    return result
