"""Historian location lists: distances and similarity (2024, day 1)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split whitespace-separated number pairs into a left and a right list.

    A trailing number without a partner is ignored.
    """
    numbers = iter(int(token) for token in text.split())
    left: list[int] = []
    right: list[int] = []
    for a, b in zip(numbers, numbers):
        left.append(a)
        right.append(b)
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum the distances between the lists paired up in sorted order."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum each left number times how often it occurs in the right list."""
    occurrences = Counter(right)
    return sum(number * occurrences[number] for number in left)


def part1(text: str) -> int:
    """Return the total distance between the two lists in ``text``."""
    return total_distance(*parse_lists(text))


def part2(text: str) -> int:
    """Return the similarity score of the two lists in ``text``."""
    return similarity_score(*parse_lists(text))