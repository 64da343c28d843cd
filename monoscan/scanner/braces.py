"""Brace depth tracking over line sequences.

Depth is a one-dimensional automaton: it starts at 0 and each visited
line moves it by -1, 0 or +1 depending on which brace characters the
line contains. Presence is what counts, not the number of braces, so
``"}}"`` moves depth by exactly -1 and ``"{ }"`` leaves it unchanged.

Walks stop at a caller-chosen terminal depth: 1 when looking for the
opening line of an enclosing block, 0 when looking for a closing line.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from monoscan.constants import CLOSING_BRACE, OPENING_BRACE


def has_opening_brace(line: str) -> bool:
    return OPENING_BRACE in line


def has_closing_brace(line: str) -> bool:
    return CLOSING_BRACE in line


def depth_delta(line: str) -> int:
    """Depth change contributed by a single line."""
    delta = 0
    if OPENING_BRACE in line:
        delta += 1
    if CLOSING_BRACE in line:
        delta -= 1
    return delta


def is_brace_neutral(line: str) -> bool:
    """True if the line has no brace at all, or both kinds of brace."""
    return has_opening_brace(line) == has_closing_brace(line)


def walk_down(lines: Sequence[str], start: int) -> Iterator[tuple[int, int, int]]:
    """Walk forward from ``start``, tracking depth.

    Yields:
        ``(index, depth_before, depth_after)`` for every line from ``start``
        to the end of the sequence.
    """
    depth = 0
    for i in range(max(start, 0), len(lines)):
        before = depth
        depth += depth_delta(lines[i])
        yield i, before, depth


def walk_up(lines: Sequence[str], start: int) -> Iterator[tuple[int, int]]:
    """Walk backward from ``start`` down to index 0, tracking depth.

    Yields:
        ``(index, depth_after)`` for every visited line.
    """
    depth = 0
    for i in range(min(start, len(lines) - 1), -1, -1):
        depth += depth_delta(lines[i])
        yield i, depth


def find_enclosing_open(lines: Sequence[str], start: int) -> int | None:
    """Find the nearest line above-or-at ``start`` where upward depth hits 1.

    That line is taken as the opening brace of the block enclosing
    ``start + 1``. No attempt is made to tell class blocks from method
    or statement blocks.

    Returns:
        Line index, or None if depth never reaches exactly 1.
    """
    for i, depth in walk_up(lines, start):
        if depth == 1:
            return i
    return None


def find_closing(lines: Sequence[str], open_line: int) -> int | None:
    """Find the line where depth returns to 0 after ``open_line``.

    Depth starts at 0 and ``open_line`` contributes its own update. Only
    lines containing a closing brace can terminate the walk, so a line
    holding a self-contained ``{ }`` block closes it on the spot.

    Returns:
        Line index, or None if the sequence ends first (unbalanced input).
    """
    for i, _before, after in walk_down(lines, open_line):
        if after == 0 and has_closing_brace(lines[i]):
            return i
    return None


def find_first_opening(lines: Sequence[str], start: int) -> int | None:
    """First line at or after ``start`` containing an opening brace."""
    for i in range(max(start, 0), len(lines)):
        if has_opening_brace(lines[i]):
            return i
    return None


def is_top_level_line(lines: Sequence[str], open_line: int, target_line: int) -> bool:
    """Check whether ``target_line`` is a direct member of the block at ``open_line``.

    The target qualifies when the walk reaches it at depth exactly 1
    and the line is brace-neutral (no braces, or a one-line block).
    """
    if target_line < open_line:
        return False

    for i, before, _after in walk_down(lines, open_line):
        if i == target_line:
            return before == 1 and is_brace_neutral(lines[i])
    return False
