"""Number drills: counting, divisibility, digit puzzles and small searches."""

from __future__ import annotations

import math
from itertools import combinations
from typing import Iterable, Sequence

HASH_BASE = 31
HASH_MODULUS = 1234567891
ISBN_LENGTH = 13
SHIRT_SIZES = 6
BAG_LARGE = 5
BAG_SMALL = 3


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient n choose k."""
    if n < 0 or not 0 <= k <= n:
        raise ValueError(f"binomial needs 0 <= k <= n, got n={n}, k={k}")
    return math.comb(n, k)


def adjusted_average(scores: Iterable[int]) -> float:
    """Average after rescaling every score as score / best * 100."""
    values = list(scores)
    if not values:
        raise ValueError("no scores given")
    best = max(values)
    if best <= 0:
        raise ValueError("the best score must be positive")
    return sum(value / best * 100 for value in values) / len(values)


def rolling_hash(text: str) -> int:
    """Polynomial hash of a lowercase word: sum of letter * 31**i, mod 1234567891.

    The letter 'a' counts 1, 'b' counts 2 and so on.
    """
    total = 0
    for position, char in enumerate(text):
        if not "a" <= char <= "z":
            raise ValueError(f"{char!r} is not a lowercase letter")
        letter = ord(char) - ord("a") + 1
        total = (total + letter * pow(HASH_BASE, position, HASH_MODULUS)) % HASH_MODULUS
    return total


def _multiplicity(value: int, prime: int) -> int:
    count = 0
    while value % prime == 0:
        value //= prime
        count += 1
    return count


def trailing_zeros(n: int) -> int:
    """Number of zeros at the end of n factorial."""
    if n < 0:
        raise ValueError(f"factorial of a negative number: {n}")
    twos = sum(_multiplicity(i, 2) for i in range(1, n + 1))
    fives = sum(_multiplicity(i, 5) for i in range(1, n + 1))
    return min(twos, fives)


def _digit_sum(value: int) -> int:
    return sum(int(digit) for digit in str(value))


def smallest_generator(n: int) -> int:
    """Smallest m with m + digit_sum(m) == n, or 0 if there is none."""
    if n < 1:
        raise ValueError(f"expected a natural number, got {n}")
    return next((m for m in range(1, n) if m + _digit_sum(m) == n), 0)


def honeycomb_distance(n: int) -> int:
    """Number of rooms passed from the centre room 1 to room n, both counted."""
    if n < 1:
        raise ValueError(f"room numbers start at 1, got {n}")
    level = 1
    last_room = 1
    while n > last_room:
        level += 1
        last_room += 6 * level - 6
    return level


def gcd_lcm(a: int, b: int) -> tuple[int, int]:
    """Return the greatest common divisor and least common multiple of a and b."""
    if a < 1 or b < 1:
        raise ValueError(f"expected positive integers, got {a} and {b}")
    divisor = math.gcd(a, b)
    return divisor, divisor * (a // divisor) * (b // divisor)


def blackjack(cards: Iterable[int], limit: int) -> int:
    """Largest sum of three different cards not above *limit*, or 0."""
    return max(
        (total for total in map(sum, combinations(list(cards), 3)) if total <= limit),
        default=0,
    )


def snail_days(up: int, down: int, height: int) -> int:
    """Days a snail climbing *up* by day and slipping *down* by night needs."""
    if not 0 <= down < up <= height:
        raise ValueError(
            f"expected 0 <= down < up <= height, got {down}, {up}, {height}"
        )
    if up == height:
        return 1
    remaining = height - up
    gain = up - down
    days = remaining // gain + 1
    return days if remaining % gain == 0 else days + 1


def _fizzbuzz_word(number: int) -> str:
    if number % 3 == 0:
        return "FizzBuzz" if number % 5 == 0 else "Fizz"
    return "Buzz" if number % 5 == 0 else str(number)


def fizzbuzz_next(words: Sequence[str]) -> str:
    """Given three consecutive FizzBuzz outputs, return the one that follows."""
    if len(words) != 3:
        raise ValueError(f"expected three words, got {len(words)}")
    for index, word in enumerate(words):
        if word.isdigit():
            return _fizzbuzz_word(int(word) + 3 - index)
    raise ValueError("none of the words is a number")


def order_bundles(
    visitors: int, sizes: Iterable[int], shirt_bundle: int, pen_bundle: int
) -> tuple[int, int, int]:
    """Return (shirt bundles, full pen bundles, single pens) to order.

    Each of the six shirt sizes is ordered in whole bundles covering its
    demand; pens are ordered exactly, as full bundles plus single pens.
    """
    demand = list(sizes)
    if len(demand) != SHIRT_SIZES:
        raise ValueError(f"expected {SHIRT_SIZES} shirt sizes, got {len(demand)}")
    if shirt_bundle < 1 or pen_bundle < 1:
        raise ValueError("bundle sizes must be positive")
    shirts = sum(-(-count // shirt_bundle) for count in demand)
    pens, single = divmod(visitors, pen_bundle)
    return shirts, pens, single


def isbn_missing_digit(code: str) -> int:
    """Recover the digit marked '*' in a 13-digit ISBN from its check sum."""
    code = code.strip()
    if len(code) != ISBN_LENGTH:
        raise ValueError(f"an ISBN has {ISBN_LENGTH} characters, got {len(code)}")
    if code.count("*") != 1:
        raise ValueError("exactly one digit must be marked with '*'")
    total = 0
    missing_weight = 1
    for index, char in enumerate(code):
        weight = 3 if index % 2 else 1
        if char == "*":
            missing_weight = weight
        elif char.isdigit():
            total += int(char) * weight
        else:
            raise ValueError(f"{char!r} is not a digit")
    for digit in range(10):
        if (total + digit * missing_weight) % 10 == 0:
            return digit
    raise ValueError(f"no digit completes {code!r}")


def primes_between(low: int, high: int) -> list[int]:
    """Primes p with low <= p <= high, by the sieve of Eratosthenes."""
    if low < 0:
        raise ValueError(f"lower bound must not be negative, got {low}")
    if high < low:
        return []
    composite = bytearray(high + 1)
    composite[0:2] = b"\x01\x01"[: high + 1]
    for i in range(2, math.isqrt(high) + 1):
        if not composite[i]:
            composite[i * i :: i] = b"\x01" * len(range(i * i, high + 1, i))
    return [i for i in range(low, high + 1) if not composite[i]]


def sugar_bags(weight: int) -> int:
    """Fewest 5 kg and 3 kg bags holding exactly *weight* kg, or -1."""
    if weight < 0:
        raise ValueError(f"weight must not be negative, got {weight}")
    for large in range(weight // BAG_LARGE, -1, -1):
        rest = weight - BAG_LARGE * large
        if rest % BAG_SMALL == 0:
            return large + rest // BAG_SMALL
    return -1


def is_palindrome(word: str) -> bool:
    """Whether *word* reads the same forwards and backwards."""
    if not word:
        raise ValueError("empty word")
    return word == word[::-1]