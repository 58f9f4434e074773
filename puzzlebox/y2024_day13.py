"""Claw machines: button presses that reach the prize (2024, day 13)."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_PAIR = re.compile(r"(\d+).*?(\d+)")

PRIZE_OFFSET = 10_000_000_000_000
MAX_PRESSES = 100
A_COST = 3
B_COST = 1

Pair = tuple[int, int]


@dataclass(frozen=True)
class ClawMachine:
    """Movement of buttons A and B, and where the prize lies."""

    button_a: Pair
    button_b: Pair
    prize: Pair


def _pair(line: str) -> Pair:
    match = _PAIR.search(line)
    if match is None:
        raise ValueError(f"no number pair in {line!r}")
    return int(match.group(1)), int(match.group(2))


def parse_machines(text: str) -> list[ClawMachine]:
    """Parse blocks of button A, button B and prize lines."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) % 3:
        raise ValueError("each machine needs three lines")
    pairs = iter(_pair(line) for line in lines)
    return [ClawMachine(a, b, prize) for a, b, prize in zip(pairs, pairs, pairs)]


def cheapest_brute_force(machine: ClawMachine) -> Pair | None:
    """Try every press count below 100 for each button.

    Returns the smallest A count and the smallest B count among the solutions,
    or ``None`` when there is none.
    """
    (ax, ay), (bx, by), (px, py) = machine.button_a, machine.button_b, machine.prize
    solutions = [
        (a, b)
        for a in range(MAX_PRESSES)
        for b in range(MAX_PRESSES)
        if a * ax + b * bx == px and a * ay + b * by == py
    ]
    if not solutions:
        return None
    return min(a for a, _ in solutions), min(b for _, b in solutions)


def solve_exact(machine: ClawMachine) -> Pair | None:
    """Solve the two linear equations; ``None`` if there is no unique integer solution.

    The presses returned may be negative.
    """
    (a1, a2), (b1, b2), (p1, p2) = machine.button_a, machine.button_b, machine.prize
    det = a1 * b2 - a2 * b1
    if det == 0:
        return None
    x_num = p1 * b2 - p2 * b1
    y_num = a1 * p2 - a2 * p1
    if x_num % det or y_num % det:
        return None
    return x_num // det, y_num // det


def _tokens(presses: Pair) -> int:
    return presses[0] * A_COST + presses[1] * B_COST


def part1(text: str) -> int:
    """Sum the tokens needed for the winnable machines, at most 100 presses each."""
    return sum(
        _tokens(presses)
        for presses in map(cheapest_brute_force, parse_machines(text))
        if presses is not None
    )


def part2(text: str) -> int:
    """Sum the tokens needed once every prize is moved by the large offset."""
    total = 0
    for machine in parse_machines(text):
        px, py = machine.prize
        shifted = replace(machine, prize=(px + PRIZE_OFFSET, py + PRIZE_OFFSET))
        presses = solve_exact(shifted)
        if presses is None or presses[0] < 0 or presses[1] < 0:
            continue
        total += _tokens(presses)
    return total