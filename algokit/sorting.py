"""Classic sorting algorithms.

Every function takes an iterable and returns a new sorted list, leaving its
input untouched.
"""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterable
from itertools import accumulate, chain
from typing import Any

BUCKET_COUNT = 10
RADIX = 10


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    length = len(result)
    for i in range(length - 1):
        for j in range(length - 1 - i):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def bubble_sort_early_exit(items: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops as soon as a pass makes no swap."""
    result = list(items)
    length = len(result)
    for i in range(length - 1):
        swapped = False
        for j in range(length - 1 - i):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def _bucket_index(value: int) -> int:
    # Integer division truncating toward zero.
    quotient = abs(value) // BUCKET_COUNT
    return quotient if value >= 0 else -quotient


def bucket_sort(values: Iterable[int]) -> list[int]:
    """Sort integers in the range -9..99 using ten buckets of width ten.

    Each value is inserted in order into its bucket; the buckets are then
    concatenated. Raises ValueError for a value that has no bucket.
    """
    buckets: list[list[int]] = [[] for _ in range(BUCKET_COUNT)]
    for value in values:
        index = _bucket_index(value)
        if not 0 <= index < BUCKET_COUNT:
            raise ValueError(f"value {value} is outside the bucket range")
        bisect.insort_right(buckets[index], value)
    return list(chain.from_iterable(buckets))


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers."""
    data = list(values)
    if not data:
        return []
    if min(data) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(data) + 1)
    for value in data:
        counts[value] += 1
    positions = list(accumulate(counts))
    output: list[int] = [0] * len(data)
    for value in reversed(data):
        positions[value] -= 1
        output[positions[value]] = value
    return output


def _sift_down(heap: list[Any], start: int, end: int) -> None:
    parent = start
    child = 2 * parent + 1
    while child <= end:
        if child + 1 <= end and heap[child] < heap[child + 1]:
            child += 1
        if heap[parent] > heap[child]:
            return
        heap[parent], heap[child] = heap[child], heap[parent]
        parent = child
        child = 2 * parent + 1


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with a max-heap, moving the root behind the heap each round."""
    result = list(items)
    length = len(result)
    for i in range(length // 2 - 1, -1, -1):
        _sift_down(result, i, length - 1)
    for i in range(length - 1, 0, -1):
        result[0], result[i] = result[i], result[0]
        _sift_down(result, 0, i - 1)
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Insert each element into its place in the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Bottom-up merge sort, doubling the run length each pass."""
    current = list(items)
    length = len(current)
    segment = 1
    while segment < length:
        merged: list[Any] = []
        for start in range(0, length, 2 * segment):
            middle = min(start + segment, length)
            high = min(start + 2 * segment, length)
            merged.extend(_merge(current[start:middle], current[middle:high]))
        current = merged
        segment *= 2
    return current


def merge_sort_recursive(items: Iterable[Any]) -> list[Any]:
    """Top-down merge sort; the left half takes the middle element."""
    data = list(items)
    if len(data) <= 1:
        return data
    split = (len(data) - 1) // 2 + 1
    return _merge(merge_sort_recursive(data[:split]), merge_sort_recursive(data[split:]))


def _partition_first(data: list[Any], low: int, high: int) -> int:
    first, last = low, high
    key = data[first]
    while first < last:
        while first < last and data[last] >= key:
            last -= 1
        if first < last:
            data[first] = data[last]
            first += 1
        while first < last and data[first] <= key:
            first += 1
        if first < last:
            data[last] = data[first]
            last -= 1
    data[first] = key
    return first


def _partition_last(data: list[Any], start: int, end: int) -> int:
    pivot = data[end]
    left, right = start, end - 1
    while left < right:
        while data[left] < pivot and left < right:
            left += 1
        while data[right] >= pivot and left < right:
            right -= 1
        data[left], data[right] = data[right], data[left]
    if data[left] >= data[end]:
        data[left], data[end] = data[end], data[left]
    else:
        left += 1
    return left


def _quick(
    data: list[Any], low: int, high: int, partition: Callable[[list[Any], int, int], int]
) -> None:
    # Recurse into the smaller side and loop on the larger to bound the depth.
    while low < high:
        pivot = partition(data, low, high)
        if pivot - low < high - pivot:
            _quick(data, low, pivot - 1, partition)
            low = pivot + 1
        else:
            _quick(data, pivot + 1, high, partition)
            high = pivot - 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort using the first element of each range as pivot."""
    result = list(items)
    _quick(result, 0, len(result) - 1, _partition_first)
    return result


def quick_sort_last_pivot(items: Iterable[Any]) -> list[Any]:
    """Quicksort using the last element of each range as pivot."""
    result = list(items)
    _quick(result, 0, len(result) - 1, _partition_last)
    return result


def quick_sort_iterative(items: Iterable[Any]) -> list[Any]:
    """Last-pivot quicksort driven by an explicit stack of ranges."""
    result = list(items)
    if not result:
        return result
    pending = [(0, len(result) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = _partition_last(result, start, end)
        pending.append((start, pivot - 1))
        pending.append((pivot + 1, end))
    return result


def max_digits(values: Iterable[int]) -> int:
    """Number of decimal digits of the largest value (at least 1)."""
    data = list(values)
    if not data:
        raise ValueError("max_digits() needs at least one value")
    largest = max(data)
    digits = 1
    while largest >= RADIX:
        largest //= RADIX
        digits += 1
    return digits


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    data = list(values)
    if not data:
        return data
    if min(data) < 0:
        raise ValueError("radix sort needs non-negative integers")
    radix = 1
    for _ in range(max_digits(data)):
        buckets: list[list[int]] = [[] for _ in range(RADIX)]
        for value in data:
            buckets[(value // radix) % RADIX].append(value)
        data = list(chain.from_iterable(buckets))
        radix *= RADIX
    return data


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Move the smallest remaining element to the end of the sorted prefix."""
    result = list(items)
    length = len(result)
    for i in range(length - 1):
        smallest = min(range(i, length), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Shell sort with the 1, 4, 13, 40, ... gap sequence."""
    result = list(items)
    length = len(result)
    gap = 1
    while gap < length // 3:
        gap = 3 * gap + 1
    while gap >= 1:
        for i in range(gap, length):
            j = i
            while j >= gap and result[j] < result[j - gap]:
                result[j], result[j - gap] = result[j - gap], result[j]
                j -= gap
        gap //= 3
    return result