"""Plutonian pebbles that split and multiply on every blink (2024, day 11)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from functools import lru_cache


def transform_stone(stone: int) -> tuple[int, ...]:
    """Return the stones one stone becomes after a blink."""
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


_transform_cached = lru_cache(maxsize=None)(transform_stone)


def blink_list(stones: Iterable[int]) -> list[int]:
    """Return the row of stones after one blink, in order."""
    return [new for stone in stones for new in transform_stone(stone)]


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Return how many stones there are after ``blinks`` blinks."""
    if blinks < 0:
        raise ValueError(f"negative number of blinks: {blinks}")
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, count in counts.items():
            for new in _transform_cached(stone):
                following[new] += count
        counts = following
    return sum(counts.values())


def _stones(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def part1(text: str) -> int:
    """Count the stones after 25 blinks."""
    stones = _stones(text)
    for _ in range(25):
        stones = blink_list(stones)
    return len(stones)


def part2(text: str) -> int:
    """Count the stones after 75 blinks."""
    return count_stones(_stones(text), 75)