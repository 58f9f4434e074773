"""Disk fragmenter: compacting blocks and whole files (2024, day 9)."""

from __future__ import annotations

from collections.abc import Sequence

Block = int | None


def expand_disk_map(disk_map: str) -> list[Block]:
    """Expand a dense disk map into blocks: file ids, and ``None`` for free space."""
    blocks: list[Block] = []
    for index, char in enumerate(disk_map):
        if not char.isdigit():
            raise ValueError(f"not a digit in disk map: {char!r}")
        file_id = index // 2 if index % 2 == 0 else None
        blocks.extend([file_id] * int(char))
    return blocks


def compact_blocks(blocks: Sequence[Block]) -> list[Block]:
    """Move file blocks one at a time from the end into the leftmost free blocks."""
    disk = list(blocks)
    left, right = 0, len(disk) - 1
    while left < right:
        while right > left and disk[right] is None:
            right -= 1
        while left < right and disk[left] is not None:
            left += 1
        disk[left], disk[right] = disk[right], disk[left]
        left += 1
        right -= 1
    return disk


def _leftmost_gap(disk: Sequence[Block], end: int, length: int) -> int | None:
    """Return the start of the leftmost free run in ``disk[:end + 1]`` that holds ``length``.

    Only runs with a file block directly to their left count.
    """
    run_start: int | None = None
    for index in range(end + 1):
        if disk[index] is None:
            if run_start is None:
                run_start = index
            if run_start > 0 and index - run_start + 1 >= length:
                return run_start
        else:
            run_start = None
    return None


def compact_files(blocks: Sequence[Block]) -> list[Block]:
    """Move whole files, highest position first, into the leftmost gap that fits."""
    disk = list(blocks)
    i = len(disk) - 1
    while i >= 0:
        while i >= 0 and disk[i] is None:
            i -= 1
        if i < 0:
            break
        file_id = disk[i]
        length = 0
        while i >= 0 and disk[i] == file_id:
            i -= 1
            length += 1
        target = _leftmost_gap(disk, i, length)
        if target is not None:
            start = i + 1
            disk[target : target + length], disk[start : start + length] = (
                disk[start : start + length],
                disk[target : target + length],
            )
    return disk


def checksum(blocks: Sequence[Block]) -> int:
    """Sum each block's position times its file id, skipping free blocks."""
    return sum(position * file_id for position, file_id in enumerate(blocks) if file_id is not None)


def _disk_map(text: str) -> str:
    tokens = text.split()
    if not tokens:
        raise ValueError("empty disk map")
    return tokens[0]


def part1(text: str) -> int:
    """Return the checksum after compacting block by block."""
    return checksum(compact_blocks(expand_disk_map(_disk_map(text))))


def part2(text: str) -> int:
    """Return the checksum after compacting whole files."""
    return checksum(compact_files(expand_disk_map(_disk_map(text))))