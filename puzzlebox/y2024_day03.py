"""Corrupted memory multiplications (2024, day 3)."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_INSTRUCTION = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)|do\(\)|don't\(\)")


def sum_multiplications(memory: str) -> int:
    """Sum the products of every well-formed ``mul(a,b)`` in ``memory``."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(memory))


def sum_enabled_multiplications(memory: str) -> int:
    """Sum the products of ``mul`` instructions not switched off by ``don't()``."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(memory):
        token = match.group()
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total


def _memory(text: str) -> str:
    return "".join(text.splitlines())


def part1(text: str) -> int:
    """Sum all multiplications in ``text``, its lines joined together."""
    return sum_multiplications(_memory(text))


def part2(text: str) -> int:
    """Sum the enabled multiplications in ``text``, its lines joined together."""
    return sum_enabled_multiplications(_memory(text))