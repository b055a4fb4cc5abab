"""Queue drills: a command-driven queue, the Josephus order, a priority
printer, the discard-and-move card game and a stack that cancels entries."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

EMPTY = -1
MIN_PRIORITY = 1
MAX_PRIORITY = 9


class CommandQueue:
    """A FIFO queue of integers answering text commands.

    Reading from an empty queue yields -1 instead of raising.
    """

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        """Add *value* at the back."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the front value, or -1 if the queue is empty."""
        return self._items.popleft() if self._items else EMPTY

    def size(self) -> int:
        """Number of values held."""
        return len(self._items)

    def empty(self) -> bool:
        """Whether the queue holds no values."""
        return not self._items

    def front(self) -> int:
        """The front value, or -1 if the queue is empty."""
        return self._items[0] if self._items else EMPTY

    def back(self) -> int:
        """The back value, or -1 if the queue is empty."""
        return self._items[-1] if self._items else EMPTY

    def execute(self, command: str) -> int | None:
        """Run one command line such as ``push 3`` or ``front``.

        Returns the printed answer, or None for ``push``. ``empty`` answers
        1 or 0. Unknown or malformed commands raise ValueError.
        """
        parts = command.split()
        if not parts:
            raise ValueError("empty command")
        name, args = parts[0], parts[1:]
        if name == "push":
            if len(args) != 1:
                raise ValueError(f"push takes one number, got {command!r}")
            try:
                value = int(args[0])
            except ValueError:
                raise ValueError(f"push takes a number, got {args[0]!r}") from None
            self.push(value)
            return None
        if args:
            raise ValueError(f"{name} takes no arguments, got {command!r}")
        if name == "pop":
            return self.pop()
        if name == "size":
            return self.size()
        if name == "empty":
            return int(self.empty())
        if name == "front":
            return self.front()
        if name == "back":
            return self.back()
        raise ValueError(f"unknown command {name!r}")


def run_commands(commands: Iterable[str]) -> list[int]:
    """Run commands on a fresh queue and collect every printed answer."""
    queue = CommandQueue()
    answers = (queue.execute(command) for command in commands)
    return [answer for answer in answers if answer is not None]


def josephus(n: int, k: int) -> list[int]:
    """Order in which people 1..n standing in a circle leave, every k-th going."""
    if n < 1:
        raise ValueError(f"need at least one person, got {n}")
    if k < 1:
        raise ValueError(f"step must be positive, got {k}")
    circle = deque(range(1, n + 1))
    order: list[int] = []
    while circle:
        circle.rotate(-(k - 1))
        order.append(circle.popleft())
    return order


def printer_queue(priorities: Sequence[int], target: int) -> int:
    """Position at which document *target* is printed.

    The front document is printed only if no queued document has a higher
    priority; otherwise it moves to the back. Priorities run from 1 to 9.
    """
    if not 0 <= target < len(priorities):
        raise ValueError(f"target {target} outside the queue of {len(priorities)}")
    for priority in priorities:
        if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
            raise ValueError(
                f"priority {priority} outside {MIN_PRIORITY}..{MAX_PRIORITY}"
            )
    queue = deque(enumerate(priorities))
    printed = 0
    while True:
        index, priority = queue.popleft()
        if any(other > priority for _, other in queue):
            queue.append((index, priority))
            continue
        printed += 1
        if index == target:
            return printed


def last_card(n: int) -> int:
    """Card left when cards 1..n alternately are discarded and moved to the bottom."""
    if n < 1:
        raise ValueError(f"need at least one card, got {n}")
    cards = deque(range(1, n + 1))
    while len(cards) > 1:
        cards.popleft()
        cards.append(cards.popleft())
    return cards[0]


def zero_sum(numbers: Iterable[int]) -> int:
    """Sum of the numbers kept, where each 0 cancels the latest kept number."""
    kept: list[int] = []
    for number in numbers:
        if number == 0:
            if not kept:
                raise ValueError("a zero with nothing left to cancel")
            kept.pop()
        else:
            kept.append(number)
    return sum(kept)