"""Stack and lookup drills: card counting, membership, stack-built
sequences, bracket balance and body-size ranks."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

PUSH = "+"
POP = "-"
_PAIRS = {")": "(", "]": "["}
_TERMINATOR = "."


def count_cards(cards: Iterable[int], queries: Iterable[int]) -> list[int]:
    """For each query, how many of *cards* carry that number."""
    counts = Counter(cards)
    return [counts[query] for query in queries]


def membership(known: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """For each query, whether it occurs among *known*."""
    seen = set(known)
    return [query in seen for query in queries]


def stack_sequence(sequence: Sequence[int]) -> list[str] | None:
    """Push/pop operations that produce *sequence* from a stack.

    Numbers 1..n are pushed in ascending order; popping yields the output.
    Returns the operations as '+' and '-' marks, or None when the sequence
    cannot be produced. The sequence must be a permutation of 1..n.
    """
    n = len(sequence)
    if n == 0:
        raise ValueError("empty sequence")
    if sorted(sequence) != list(range(1, n + 1)):
        raise ValueError(f"expected a permutation of 1..{n}")
    operations: list[str] = []
    stack: list[int] = []
    next_number = 1
    for number in sequence:
        while next_number <= number:
            stack.append(next_number)
            operations.append(PUSH)
            next_number += 1
        if not stack or stack[-1] != number:
            return None
        stack.pop()
        operations.append(POP)
    return operations


def is_balanced(line: str) -> bool:
    """Whether round and square brackets match up to the first '.'.

    Text after the first full stop is ignored; other characters are skipped.
    """
    text, _, _ = line.partition(_TERMINATOR)
    stack: list[str] = []
    for char in text:
        if char in "([":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def body_ranks(people: Sequence[tuple[int, int]]) -> list[int]:
    """Rank of each (weight, height) pair.

    A person's rank is one more than the number of people who are both
    heavier and taller.
    """
    return [
        1 + sum(1 for w, h in people if w > weight and h > height)
        for weight, height in people
    ]