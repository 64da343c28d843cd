"""
Core types for scan results.

These are the small value objects shared between the scanner's
composite queries and the analysis service.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineRange:
    """A range of 0-based line indices in a source file (inclusive)."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("start must be non-negative")
        if self.end < self.start:
            raise ValueError("end must be >= start")

    @property
    def line_count(self) -> int:
        """Number of lines in this range."""
        return self.end - self.start + 1

    def strictly_contains(self, line: int) -> bool:
        """Check if a line index is inside the range, excluding both ends."""
        return self.start < line < self.end
