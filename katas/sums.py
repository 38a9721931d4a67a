"""Sums over sequences of integers."""

from collections.abc import Iterable, Sequence


def sum_numbers(numbers: Iterable[int]) -> int:
    """Return the total of all numbers."""
    return sum(numbers)


def sum_all(*args: Iterable[int]) -> list[int]:
    """Return the total of each collection, in order."""
    return [sum_numbers(numbers) for numbers in args]


def sum_all_tails(*args: Sequence[int]) -> list[int]:
    """Return the total of each collection without its first element.

    An empty collection sums to zero.
    """
    return [sum_numbers(numbers[1:]) for numbers in args]