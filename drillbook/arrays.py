"""Array drills: searching, sorting, filtering and reshaping sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby


def _require_items(values: Sequence) -> None:
    if not values:
        raise ValueError("the sequence must not be empty")


def reverse_stack(stack: Sequence) -> list:
    """Return the stack in reversed order.

    The stack is a sequence whose last item is the top, so the old bottom
    becomes the new top.
    """
    if not stack:
        return []
    *rest, top = stack
    reversed_rest = reverse_stack(rest)
    # Placing the old top at the bottom of the reversed remainder.
    return [top, *reversed_rest]


def format_grid(rows: Iterable[Iterable]) -> list[str]:
    """Return one line per row, each value followed by a single space."""
    return ["".join(f"{value} " for value in row) for row in rows]


def largest(values: Sequence):
    """Return the largest value of a non-empty sequence."""
    _require_items(values)
    return max(values)


def min_max(values: Sequence) -> tuple:
    """Return ``(minimum, maximum)`` of a non-empty sequence."""
    _require_items(values)
    return min(values), max(values)


def binary_search(values: Sequence, target) -> int | None:
    """Return an index of ``target`` in the ascending sequence, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        probe = values[mid]
        if probe == target:
            return mid
        if probe < target:
            left = mid + 1
        else:
            right = mid - 1
    return None


def average(values: Sequence) -> float:
    """Return the arithmetic mean of a non-empty sequence."""
    _require_items(values)
    return sum(values) / len(values)


def bubble_sort(values: Iterable, descending: bool = False) -> list:
    """Return a bubble-sorted copy, ascending unless ``descending`` is set."""
    items = list(values)
    out_of_order = (lambda a, b: a < b) if descending else (lambda a, b: a > b)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if out_of_order(items[j], items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Return an ascending copy sorted by merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def selection_sort(values: Iterable) -> list:
    """Return an ascending copy sorted by selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable) -> list:
    """Return an ascending copy sorted by insertion sort."""
    items: list = []
    for key in values:
        position = len(items)
        while position > 0 and items[position - 1] > key:
            position -= 1
        items.insert(position, key)
    return items


def dedupe_sorted(values: Iterable) -> list:
    """Return the sorted sequence with runs of equal values collapsed."""
    return [value for value, _ in groupby(values)]


def merge_arrays(first: Iterable, second: Iterable) -> list:
    """Return the items of ``first`` followed by those of ``second``."""
    return [*first, *second]


def remove_all(values: Iterable, target) -> list:
    """Return the values with every occurrence of ``target`` removed."""
    return [value for value in values if value != target]


def common_elements(first: Iterable, second: Iterable) -> list:
    """Return the items of ``first`` that also occur in ``second``, in order.

    Repeated items of ``first`` are kept once for each occurrence.
    """
    pool = list(second)
    return [value for value in first if value in pool]


def copy_values(values: Iterable) -> list:
    """Return a new list holding the same values."""
    return list(values)


def rotate_left(values: Sequence) -> list:
    """Return the values rotated one place to the left."""
    items = list(values)
    return items[1:] + items[:1]


def reverse_values(values: Iterable) -> list:
    """Return the values in reverse order."""
    return list(reversed(list(values)))