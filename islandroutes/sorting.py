"""Searching and sorting of comparable items, reporting the work done."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence


def binary_search(items: Sequence[Any], target: Any) -> tuple[int, int]:
    """Find ``target`` in the sorted ``items``.

    Returns ``(index, probes)``; when the target is absent, ``(-1, 0)``.
    """
    low, high = 0, len(items) - 1
    probes = 0
    while low <= high:
        probes += 1
        mid = (low + high) // 2
        if items[mid] > target:
            high = mid - 1
        elif items[mid] < target:
            low = mid + 1
        else:
            return mid, probes
    return -1, 0


def bubble_sort(items: MutableSequence[Any]) -> int:
    """Sort ``items`` in place by exchange; return the number of swaps."""
    swaps = 0
    size = len(items)
    for i in range(size):
        for j in range(i + 1, size):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
                swaps += 1
    return swaps


def _quicksort(items: MutableSequence[Any], low: int, high: int) -> int:
    swaps = 0
    if low >= high:
        return swaps
    pivot = items[(low + high) // 2]
    i, j = low, high
    while i <= j:
        while items[i] < pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i <= j:
            if i < j and items[i] != items[j]:
                items[i], items[j] = items[j], items[i]
                swaps += 1
            i += 1
            j -= 1
    swaps += _quicksort(items, low, j)
    swaps += _quicksort(items, i, high)
    return swaps


def quicksort(items: MutableSequence[Any]) -> int:
    """Sort ``items`` in place by partitioning; return the number of swaps."""
    return _quicksort(items, 0, len(items) - 1)