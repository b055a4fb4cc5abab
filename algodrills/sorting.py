"""Sorting drills: merge sort, tree sort, insertion and counting sorts, and
sorting tasks built on them."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass, field
from typing import Iterable

COUNTING_LIMIT = 10_000
MIN_AGE = 1
MAX_AGE = 200
TRIM_RATIO = 0.15


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new list with *values* in ascending order (stable merge sort)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    left = merge_sort(items[:mid])
    right = merge_sort(items[mid:])
    merged: list[int] = []
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


@dataclass
class _Node:
    value: int
    left: _Node | None = field(default=None, repr=False)
    right: _Node | None = field(default=None, repr=False)


def _insert(root: _Node, value: int) -> None:
    node = root
    while True:
        if value > node.value:
            if node.right is None:
                node.right = _Node(value)
                return
            node = node.right
        else:
            if node.left is None:
                node.left = _Node(value)
                return
            node = node.left


def _in_order(root: _Node | None):
    stack: list[_Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def bst_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting into a binary search tree and walking it in order.

    Values equal to a node go to its left subtree.
    """
    iterator = iter(values)
    try:
        root = _Node(next(iterator))
    except StopIteration:
        return []
    for value in iterator:
        _insert(root, value)
    return list(_in_order(root))


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each value after any equal values already placed."""
    result: list[int] = []
    for value in values:
        bisect.insort_right(result, value)
    return result


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers in the range 0..10000 by counting occurrences."""
    counts = [0] * (COUNTING_LIMIT + 1)
    for value in values:
        if not 0 <= value <= COUNTING_LIMIT:
            raise ValueError(
                f"value {value} outside the range 0..{COUNTING_LIMIT}"
            )
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def trimmed_mean(opinions: Iterable[int]) -> int:
    """Average after dropping the top and bottom 15 percent, rounded.

    The number dropped from each end is 15 percent of the count, rounded
    half away from zero; so is the final average. No opinions give 0.
    """
    ordered = merge_sort(opinions)
    count = len(ordered)
    if count == 0:
        return 0
    cut = _round_half_away(count * TRIM_RATIO)
    kept = ordered[cut:count - cut]
    return _round_half_away(sum(kept) / len(kept))


def sort_members(members: Iterable[tuple[int, str]]) -> list[tuple[int, str]]:
    """Order (age, name) pairs by age, keeping join order among equal ages."""
    listed = list(members)
    for age, name in listed:
        if not MIN_AGE <= age <= MAX_AGE:
            raise ValueError(
                f"age {age} of {name!r} outside the range {MIN_AGE}..{MAX_AGE}"
            )
    return sorted(listed, key=lambda member: member[0])


def sort_words(words: Iterable[str]) -> list[str]:
    """Unique words, shorter first, equal lengths in dictionary order."""
    return sorted(set(words), key=lambda word: (len(word), word))