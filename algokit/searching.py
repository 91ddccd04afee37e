"""Searching algorithms over sequences.

Each search returns the index of a matching element, or None when the
target is absent.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

MAX_FIBONACCI = 20


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Iterative binary search over a sorted sequence."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def _binary_search_range(values: Sequence[Any], target: Any, low: int, high: int) -> int | None:
    if low > high:
        return None
    mid = low + (high - low) // 2
    if values[mid] == target:
        return mid
    if values[mid] > target:
        return _binary_search_range(values, target, low, mid - 1)
    return _binary_search_range(values, target, mid + 1, high)


def binary_search_recursive(values: Sequence[Any], target: Any) -> int | None:
    """Recursive binary search over a sorted sequence."""
    return _binary_search_range(values, target, 0, len(values) - 1)


def fibonacci_numbers(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting 0, 1."""
    numbers: list[int] = []
    a, b = 0, 1
    for _ in range(count):
        numbers.append(a)
        a, b = b, a + b
    return numbers


def fibonacci_search(values: Sequence[Any], key: Any) -> int | None:
    """Fibonacci search over a sorted sequence.

    The table holds the first twenty Fibonacci numbers, so a sequence longer
    than 4180 elements raises ValueError.
    """
    fib = fibonacci_numbers(MAX_FIBONACCI)
    n = len(values)
    k = 0
    while n > fib[k] - 1:
        k += 1
        if k >= MAX_FIBONACCI:
            raise ValueError(f"sequence of length {n} is too long for Fibonacci search")
    padded = list(values)
    if padded:
        padded.extend([padded[-1]] * (fib[k] - 1 - n))
    low, high = 0, n - 1
    while low <= high:
        mid = low + fib[k - 1] - 1
        if key < padded[mid]:
            high = mid - 1
            k -= 1
        elif key > padded[mid]:
            low = mid + 1
            k -= 2
        else:
            return mid if mid < n else n - 1
    return None


def interpolation_search(values: Sequence[int], target: int) -> int | None:
    """Interpolation search over a sorted sequence of integers."""
    low, high = 0, len(values) - 1
    while low <= high:
        if target < values[low] or target > values[high]:
            return None
        span = values[high] - values[low]
        if span == 0:
            return low
        mid = low + (target - values[low]) // span * (high - low)
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def sequential_search(values: Sequence[Any], target: Any) -> int | None:
    """Index of the first element equal to ``target``."""
    return next((index for index, value in enumerate(values) if value == target), None)


def sentinel_search(values: Sequence[Any], target: Any) -> int | None:
    """Linear search that places the target as a sentinel at the end."""
    if not values:
        return None
    probe = list(values)
    last = probe[-1]
    probe[-1] = target
    index = 0
    while probe[index] != target:
        index += 1
    if index < len(probe) - 1 or last == target:
        return index
    return None