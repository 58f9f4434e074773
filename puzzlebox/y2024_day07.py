"""Bridge repair calibration equations (2024, day 7)."""

from __future__ import annotations

import re
from collections.abc import Sequence

_NUMBER = re.compile(r"[0-9]+")


def parse_equation(line: str) -> tuple[int, list[int]]:
    """Return the test value and the operands of a ``target: a b c`` line."""
    numbers = [int(n) for n in _NUMBER.findall(line)]
    if len(numbers) < 2:
        raise ValueError(f"equation needs a target and at least one operand: {line!r}")
    return numbers[0], numbers[1:]


def can_reach(target: int, numbers: Sequence[int], allow_concat: bool) -> bool:
    """Tell whether ``+``, ``*`` (and ``||`` if allowed), applied left to right, hit ``target``."""
    if not numbers:
        raise ValueError("no operands")
    totals = {numbers[0]}
    for number in numbers[1:]:
        following: set[int] = set()
        for total in totals:
            following.add(total + number)
            following.add(total * number)
            if allow_concat:
                following.add(int(f"{total}{number}"))
        totals = following
    return target in totals


def _calibration(text: str, allow_concat: bool) -> int:
    total = 0
    for line in text.splitlines():
        if not line.strip():
            continue
        target, numbers = parse_equation(line)
        if can_reach(target, numbers, allow_concat):
            total += target
    return total


def part1(text: str) -> int:
    """Sum the test values reachable with addition and multiplication."""
    return _calibration(text, allow_concat=False)


def part2(text: str) -> int:
    """Sum the test values reachable when concatenation is allowed too."""
    return _calibration(text, allow_concat=True)