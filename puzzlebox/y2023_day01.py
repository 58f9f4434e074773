"""Calibration values hidden in lines of text (2023, day 1)."""

from __future__ import annotations

_DIGITS = "0123456789"

_WORDS = {
    "zero": "0",
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}

_REVERSED_WORDS = {word[::-1]: digit for word, digit in _WORDS.items()}


def first_last_digits(line: str) -> int:
    """Return the two-digit number formed by the first and last digit of ``line``."""
    digits = [char for char in line if char in _DIGITS]
    if not digits:
        raise ValueError(f"no digit in {line!r}")
    return int(digits[0] + digits[-1])


def _earliest_digit(text: str, tokens: dict[str, str]) -> str:
    """Return the digit of the token (word or numeral) that occurs first in ``text``."""
    best: tuple[int, str] | None = None
    for word, digit in tokens.items():
        for needle in (word, digit):
            position = text.find(needle)
            if position != -1 and (best is None or position < best[0]):
                best = (position, digit)
    if best is None:
        raise ValueError(f"no digit or digit word in {text!r}")
    return best[1]


def spelled_digit_value(line: str) -> int:
    """Return the calibration value of ``line``, counting spelled-out digits.

    A value below ten (a leading zero) is multiplied by eleven.
    """
    first = _earliest_digit(line, _WORDS)
    last = _earliest_digit(line[::-1], _REVERSED_WORDS)
    value = int(first + last)
    if value < 10:
        value *= 11
    return value


def part1(text: str) -> int:
    """Sum the plain-digit calibration values of every word in ``text``."""
    return sum(first_last_digits(line) for line in text.split())


def part2(text: str) -> int:
    """Sum the calibration values of every word in ``text``, digit words included."""
    return sum(spelled_digit_value(line) for line in text.split())