"""Reactor level reports and their safety (2024, day 2)."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def _steady(levels: Sequence[int], rising: bool) -> bool:
    for before, after in pairwise(levels):
        if (after < before) if rising else (after > before):
            return False
        if not 1 <= abs(after - before) <= 3:
            return False
    return True


def is_safe(levels: Sequence[int]) -> bool:
    """Tell whether levels only rise or only fall, by one to three each step."""
    return _steady(levels, rising=True) or _steady(levels, rising=False)


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """Tell whether removing a single level makes the report safe."""
    return any(
        is_safe([*levels[:index], *levels[index + 1 :]]) for index in range(len(levels))
    )


def _reports(text: str) -> list[list[int]]:
    return [[int(n) for n in line.split()] for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Count the safe reports."""
    return sum(is_safe(report) for report in _reports(text))


def part2(text: str) -> int:
    """Count the reports made safe by removing one level."""
    return sum(is_safe_with_dampener(report) for report in _reports(text))