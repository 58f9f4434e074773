"""Print queue page ordering rules (2024, day 5)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import cmp_to_key

Rules = dict[int, set[int]]


def parse_input(text: str) -> tuple[Rules, list[list[int]]]:
    """Return the ``before|after`` rules and the comma-separated page updates."""
    rules: Rules = {}
    updates: list[list[int]] = []
    for raw in text.splitlines():
        line = raw.strip()
        if "|" in line:
            before, _, after = line.partition("|")
            rules.setdefault(int(before), set()).add(int(after))
        if "," in line:
            updates.append([int(page) for page in line.split(",")])
    return rules, updates


def is_ordered(pages: Sequence[int], rules: Mapping[int, set[int]]) -> bool:
    """Tell whether no page is printed after a page that must follow it."""
    must_follow: set[int] = set()
    for page in reversed(pages):
        if page in must_follow:
            return False
        must_follow |= rules.get(page, set())
    return True


def reorder(pages: Sequence[int], rules: Mapping[int, set[int]]) -> list[int]:
    """Return the pages sorted so that every applicable rule holds."""

    def compare(a: int, b: int) -> int:
        if b in rules.get(a, ()):
            return -1
        if a in rules.get(b, ()):
            return 1
        return 0

    return sorted(pages, key=cmp_to_key(compare))


def _middle(pages: Sequence[int]) -> int:
    return pages[len(pages) // 2]


def part1(text: str) -> int:
    """Sum the middle pages of the updates already in order."""
    rules, updates = parse_input(text)
    return sum(_middle(pages) for pages in updates if is_ordered(pages, rules))


def part2(text: str) -> int:
    """Sum the middle pages of the out-of-order updates once reordered."""
    rules, updates = parse_input(text)
    return sum(
        _middle(reorder(pages, rules))
        for pages in updates
        if not is_ordered(pages, rules)
    )