"""Robots patrolling a wrapping bathroom floor (2024, day 14)."""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable, Sequence

WIDTH = 101
HEIGHT = 103
SECONDS = 100

_ROBOT = re.compile(r"(-?\d+).*?(-?\d+).*?(-?\d+).*?(-?\d+)")

Robot = tuple[int, int, int, int]
Position = tuple[int, int]


def parse_robots(text: str) -> list[Robot]:
    """Parse ``p=x,y v=vx,vy`` lines into (x, y, vx, vy) tuples."""
    robots: list[Robot] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _ROBOT.search(line)
        if match is None:
            raise ValueError(f"not a robot line: {line!r}")
        x, y, vx, vy = (int(group) for group in match.groups())
        robots.append((x, y, vx, vy))
    return robots


def positions_after(
    robots: Iterable[Robot], seconds: int, width: int, height: int
) -> list[Position]:
    """Return where each robot stands after ``seconds``, wrapping at the edges."""
    return [
        ((x + vx * seconds) % width, (y + vy * seconds) % height)
        for x, y, vx, vy in robots
    ]


def safety_factor(robots: Iterable[Robot], seconds: int, width: int, height: int) -> int:
    """Multiply the robot counts of the four quadrants; the middle lines count for none."""
    mid_x, mid_y = width // 2, height // 2
    quadrants: Counter[tuple[bool, bool]] = Counter(
        (x > mid_x, y > mid_y)
        for x, y in positions_after(robots, seconds, width, height)
        if x != mid_x and y != mid_y
    )
    return math.prod(
        quadrants[key] for key in ((False, False), (False, True), (True, False), (True, True))
    )


def first_no_overlap(robots: Sequence[Robot], width: int, height: int) -> int:
    """Return the first second at which no two robots share a tile."""
    for seconds in range(math.lcm(width, height)):
        positions = positions_after(robots, seconds, width, height)
        if len(set(positions)) == len(positions):
            return seconds
    raise ValueError("the robots always overlap")


def render(positions: Iterable[Position], width: int, height: int) -> str:
    """Draw the floor: robot counts per tile, ``.`` for empty, each followed by a space."""
    counts = Counter(positions)
    return "".join(
        "".join(f"{counts[(x, y)] or '.'} " for x in range(width)) + "\n"
        for y in range(height)
    )


def part1(text: str) -> int:
    """Return the safety factor after 100 seconds."""
    return safety_factor(parse_robots(text), SECONDS, WIDTH, HEIGHT)


def part2(text: str) -> int:
    """Return the first second with every robot on its own tile."""
    return first_no_overlap(parse_robots(text), WIDTH, HEIGHT)