"""Seed almanac: mapping seeds through conversion tables (2023, day 5)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import NamedTuple

CONVERSION_ORDER = (
    "seed-to-soil map:",
    "soil-to-fertilizer map:",
    "fertilizer-to-water map:",
    "water-to-light map:",
    "light-to-temperature map:",
    "temperature-to-humidity map:",
    "humidity-to-location map:",
)


class Rule(NamedTuple):
    """One range of a conversion table."""

    destination: int
    source: int
    length: int


def map_value(rules: Iterable[tuple[int, int, int]], value: int) -> int:
    """Map ``value`` through the first rule whose source range holds it."""
    for destination, source, length in rules:
        if source <= value < source + length:
            return destination + (value - source)
    return value


@dataclass
class Almanac:
    """The seeds and the conversion tables, keyed by their header line."""

    seeds: list[int] = field(default_factory=list)
    maps: dict[str, list[Rule]] = field(default_factory=dict)

    def locate(self, seed: int) -> int:
        """Return the location a seed ends at after every conversion."""
        for name in CONVERSION_ORDER:
            seed = map_value(self.maps.get(name, ()), seed)
        return seed

    def min_location_in_range(self, start: int, length: int) -> int:
        """Return the lowest location of the seeds ``start .. start + length - 1``."""
        if length <= 0:
            raise ValueError(f"empty seed range of length {length}")
        return min(self.locate(seed) for seed in range(start, start + length))


def parse_almanac(text: str) -> Almanac:
    """Parse the seed line and the conversion tables from ``text``."""
    almanac = Almanac()
    current = ""
    for line in text.splitlines():
        if not line.strip():
            continue
        if not almanac.seeds:
            almanac.seeds = [int(n) for n in line[line.find(":") + 1 :].split()]
        elif ":" in line:
            current = line
        else:
            fields = line.split()
            if len(fields) < 3:
                raise ValueError(f"malformed conversion rule {line!r}")
            rule = Rule(*(int(n) for n in fields[:3]))
            almanac.maps.setdefault(current, []).append(rule)
    return almanac


def part1(text: str) -> int:
    """Return the lowest location of any listed seed."""
    almanac = parse_almanac(text)
    if not almanac.seeds:
        raise ValueError("no seeds")
    return min(almanac.locate(seed) for seed in almanac.seeds)


def part2(text: str) -> int:
    """Return the lowest location when the seed line lists (start, length) pairs."""
    almanac = parse_almanac(text)
    seeds = almanac.seeds
    if not seeds or len(seeds) % 2:
        raise ValueError("seed line must hold start/length pairs")
    pairs = zip(seeds[::2], seeds[1::2])
    return min(almanac.min_location_in_range(start, length) for start, length in pairs)