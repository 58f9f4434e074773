"""Scratchcards: matching numbers, points and won copies (2023, day 4)."""

from __future__ import annotations

from collections import defaultdict


def _split_card(line: str) -> tuple[list[int], list[int]]:
    """Return the winning numbers and the numbers held on one card."""
    _, colon, rest = line.partition(":")
    if not colon:
        raise ValueError(f"no ':' in {line!r}")
    winning, bar, held = rest.partition("|")
    if not bar:
        raise ValueError(f"no '|' in {line!r}")
    return [int(n) for n in winning.split()], [int(n) for n in held.split()]


def card_id(line: str) -> int:
    """Return the number of a ``Card N: ...`` line."""
    start = line.find("d ")
    end = line.find(":")
    if start == -1 or end == -1:
        raise ValueError(f"not a card line: {line!r}")
    return int(line[start + 1 : end])


def matching_count(line: str) -> int:
    """Return how many held numbers appear among the winning numbers."""
    winning, held = _split_card(line)
    winners = set(winning)
    return sum(1 for number in held if number in winners)


def card_points(line: str) -> int:
    """Return the card's points: one for the first match, doubled for each further one."""
    matches = matching_count(line)
    return 2 ** (matches - 1) if matches else 0


def _lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Sum the points of all cards."""
    return sum(card_points(line) for line in _lines(text))


def part2(text: str) -> int:
    """Count the cards held once every won copy has been processed."""
    lines = _lines(text)
    copies: defaultdict[int, int] = defaultdict(int)
    for line in lines:
        copies.setdefault(card_id(line), 1)
    for index, line in enumerate(lines, start=1):
        current = copies[index]
        for offset in range(1, matching_count(line) + 1):
            copies[index + offset] += current
    return sum(copies.values())