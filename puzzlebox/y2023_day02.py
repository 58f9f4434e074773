"""Cube games: which are possible and how much power they need (2023, day 2)."""

from __future__ import annotations

COLORS = ("red", "green", "blue")
LIMITS = {"red": 12, "green": 13, "blue": 14}


def game_number(line: str) -> int:
    """Return the game number of a ``Game N: ...`` line."""
    head, sep, _ = line.partition(":")
    if not sep:
        raise ValueError(f"no ':' in {line!r}")
    return int(head[5:])


def revealed_sets(line: str) -> list[str]:
    """Return the ``;``-separated reveals after the game header."""
    _, sep, rest = line.partition(":")
    if not sep:
        rest = line
    parts = rest.split(";")
    if parts and not parts[-1]:
        parts.pop()
    return parts


def parse_counts(reveal: str) -> dict[str, int]:
    """Return the cube count of each colour shown in one reveal."""
    counts = dict.fromkeys(COLORS, 0)
    for piece in reveal.split(","):
        fields = piece.split()
        if not fields:
            continue
        if len(fields) != 2 or fields[1] not in counts:
            raise ValueError(f"malformed cube count {piece!r}")
        counts[fields[1]] += int(fields[0])
    return counts


def is_possible(line: str) -> bool:
    """Tell whether no reveal of the game exceeds the bag's cube limits."""
    reveals = revealed_sets(line)
    if not reveals:
        return False
    return all(
        counts[color] <= LIMITS[color]
        for counts in map(parse_counts, reveals)
        for color in COLORS
    )


def game_power(line: str) -> int:
    """Return the product of the minimum cube counts that make the game possible."""
    reveals = revealed_sets(line)
    if not reveals:
        return 0
    needed = dict.fromkeys(COLORS, 0)
    for counts in map(parse_counts, reveals):
        for color in COLORS:
            needed[color] = max(needed[color], counts[color])
    return needed["red"] * needed["green"] * needed["blue"]


def _lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Sum the numbers of the possible games."""
    return sum(game_number(line) for line in _lines(text) if is_possible(line))


def part2(text: str) -> int:
    """Sum the powers of all games."""
    return sum(game_power(line) for line in _lines(text))