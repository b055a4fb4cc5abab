# algodrills

Compact solutions to a set of classic programming exercises, written as
plain functions that take Python values and return Python values. Invalid
input raises `ValueError`. The package has no dependencies outside the
standard library.

## Install

    pip install .

To run the test suite:

    pip install .[test]
    pytest

## Modules

### `algodrills.sorting`

- `merge_sort(values)` – stable merge sort; returns a new list.
- `bst_sort(values)` – inserts into a binary search tree and walks it in
  order.
- `insertion_sort(values)` – inserts each value after equal values already
  placed.
- `counting_sort(values)` – counting sort for integers in `0..10000`; a value
  outside that range raises `ValueError`.
- `trimmed_mean(opinions)` – drops 15% of the count (rounded half away from
  zero) from each end, averages the rest and rounds the same way; no opinions
  give `0`.
- `sort_members(members)` – sorts `(age, name)` pairs by age, keeping the
  given order among equal ages; ages must lie in `1..200`.
- `sort_words(words)` – distinct words, shorter first, equal lengths in
  dictionary order.

```python
from algodrills.sorting import sort_words, trimmed_mean

sort_words(["but", "i", "wont", "but", "it"])  # ['i', 'it', 'but', 'wont']
trimmed_mean([])                               # 0
```

### `algodrills.numbers`

- `binomial(n, k)` – n choose k.
- `adjusted_average(scores)` – mean after rescaling each score to
  `score / best * 100`.
- `rolling_hash(text)` – `sum(letter * 31**i) mod 1234567891` of a lowercase
  word, with `a` counting 1.
- `trailing_zeros(n)` – zeros at the end of `n!`.
- `smallest_generator(n)` – smallest `m` with `m + digit_sum(m) == n`, or `0`.
- `honeycomb_distance(n)` – rooms passed from the centre room 1 to room `n` in
  a hexagonal honeycomb, both ends counted.
- `gcd_lcm(a, b)` – `(gcd, lcm)` of two positive integers.
- `blackjack(cards, limit)` – largest sum of three cards not above `limit`,
  or `0`.
- `snail_days(up, down, height)` – days a snail needs to reach the top.
- `fizzbuzz_next(words)` – the FizzBuzz word that follows three given ones.
- `order_bundles(visitors, sizes, shirt_bundle, pen_bundle)` – shirt bundles
  for six sizes, plus full pen bundles and single pens.
- `isbn_missing_digit(code)` – the digit marked `*` in a 13-digit ISBN.
- `primes_between(low, high)` – primes in `low..high` by a sieve.
- `sugar_bags(weight)` – fewest 5 kg and 3 kg bags for an exact weight, or
  `-1`.
- `is_palindrome(word)` – whether a non-empty word reads the same both ways.

```python
from algodrills.numbers import gcd_lcm, isbn_missing_digit, sugar_bags

gcd_lcm(24, 18)                       # (6, 72)
sugar_bags(18)                        # 4
isbn_missing_digit("9788968322*73")   # 2
```

### `algodrills.queues`

- `CommandQueue` – a FIFO queue of integers with `push`, `pop`, `size`,
  `empty`, `front` and `back`; reading an empty queue gives `-1`.
  `execute(command)` runs one text command (`push X`, `pop`, `size`, `empty`,
  `front`, `back`) and returns its answer (`None` for `push`, `1`/`0` for
  `empty`); unknown or malformed commands raise `ValueError`.
- `run_commands(commands)` – runs commands on a fresh queue and returns every
  answer.
- `josephus(n, k)` – order in which people `1..n` leave a circle, every k-th
  going.
- `printer_queue(priorities, target)` – when document `target` is printed,
  a document printing only if none queued has a higher priority (1–9).
- `last_card(n)` – card left after alternately discarding the top card and
  moving the next to the bottom.
- `zero_sum(numbers)` – sum of the kept numbers, each `0` cancelling the
  latest kept one.

```python
from algodrills.queues import josephus, run_commands

josephus(7, 3)  # [3, 6, 2, 7, 5, 1, 4]
run_commands(["push 1", "push 2", "front", "back", "size", "empty", "pop"])
# [1, 2, 2, 0, 1]
```

### `algodrills.stacks`

- `count_cards(cards, queries)` – how many cards carry each queried number.
- `membership(known, queries)` – whether each query occurs among `known`.
- `stack_sequence(sequence)` – the `'+'`/`'-'` operations that produce a
  permutation of `1..n` by pushing `1..n` in order onto a stack, or `None`
  when it cannot be produced.
- `is_balanced(line)` – whether `()` and `[]` match up to the first `.`.
- `body_ranks(people)` – for each `(weight, height)`, one more than the
  number of people both heavier and taller.

```python
from algodrills.stacks import is_balanced, stack_sequence

is_balanced("([ (([( [ ] ) ( ) (( ))] )) ]).")  # True
stack_sequence([1, 2, 5, 3, 4])                 # None
```

## What it does not do

The package is a library only: it installs no command and does not read
exercise input from standard input or print answers. Callers pass Python
values to the functions and format the results themselves.