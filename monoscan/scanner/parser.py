"""Heuristic scanner for component classes and their methods.

The scanner answers structural questions about C#-style source text
without parsing it. Every query takes the file as a sequence of lines
and 0-based line indices, and reports "not found" as ``None`` (or
``False`` for yes/no questions) rather than raising. Mid-edit, partially
typed code is the normal input.

Usage:
    scanner = Scanner(default_catalog())
    lines = source.splitlines()

    if scanner.is_in_component_body(lines, cursor_line):
        implemented = scanner.find_all_method_names(lines)
"""

from __future__ import annotations

from typing import Iterable, Sequence

from monoscan.patterns import (
    BASE_CLASS_CLAUSE,
    CLASS_HEADER,
    COMPONENT_CLASS,
    METHOD_HEADER,
    RegexPattern,
    build_lifecycle_pattern,
)
from monoscan.constants import HEADER_DISQUALIFIERS
from monoscan.scanner import braces
from monoscan.utils.logger import logger


def _catalog_names(catalog: Iterable) -> list[str]:
    """Accept catalog records exposing ``.name`` as well as plain strings."""
    return [entry if isinstance(entry, str) else entry.name for entry in catalog]


class Scanner:
    """Line-oriented scanner for MonoBehaviour / NetworkBehaviour classes.

    The lifecycle pattern is compiled once from the catalog given at
    construction. Nothing else is stored, so one instance can serve any
    number of interleaved queries, from any thread.
    """

    def __init__(self, catalog: Iterable) -> None:
        """Initialize with a lifecycle catalog.

        Args:
            catalog: Ordered lifecycle messages (records with a ``name``
                attribute, or plain names). Read once, never validated.
        """
        self._lifecycle_names: tuple[str, ...] = tuple(_catalog_names(catalog))
        self._lifecycle_pattern: RegexPattern = build_lifecycle_pattern(
            self._lifecycle_names
        )
        logger.debug(
            f"Compiled lifecycle pattern from {len(self._lifecycle_names)} catalog entries"
        )

    @property
    def lifecycle_names(self) -> tuple[str, ...]:
        """Catalog names the lifecycle pattern was built from, in order."""
        return self._lifecycle_names

    # ----------------------------------------------------------------
    # Class headers
    # ----------------------------------------------------------------

    def get_enclosing_base_class(self, lines: Sequence[str], line: int) -> str | None:
        """Get the base class of the class that ``line`` is in.

        Args:
            lines: Source file lines.
            line: 0-based index of the line of interest.

        Returns:
            None if there is no usable class context, an empty string if
            the class declares no base class, otherwise the base class name.
        """
        if line < 0 or line >= len(lines):
            return None

        # Nearest opening brace containing this line.
        start = braces.find_enclosing_open(lines, line - 1)
        if start is None:
            return None

        for i in range(start, -1, -1):
            text = lines[i]

            # Anything looking like a statement, literal or closed block
            # means we walked out of a class header region.
            if any(ch in text for ch in HEADER_DISQUALIFIERS):
                return None

            if CLASS_HEADER.matches(text):
                base = BASE_CLASS_CLAUSE.first_group(text)
                return "" if base is None else base

        return None

    def find_component_class_header(self, lines: Sequence[str]) -> int | None:
        """Find the first line declaring a MonoBehaviour or NetworkBehaviour class.

        The class keyword and the base type must be on the same line.
        """
        for i, text in enumerate(lines):
            if COMPONENT_CLASS.matches(text):
                return i
        return None

    def find_generic_class_header(self, lines: Sequence[str]) -> int | None:
        """Find the first line containing ``class`` anywhere."""
        for i, text in enumerate(lines):
            if "class" in text:
                return i
        return None

    # ----------------------------------------------------------------
    # Methods
    # ----------------------------------------------------------------

    def has_lifecycle_method(self, line: str) -> bool:
        """Check if a line declares a void method named after a lifecycle message."""
        return self._lifecycle_pattern.matches(line)

    def find_lifecycle_method_name(self, line: str) -> str | None:
        """Return the lifecycle message a line declares, or None."""
        return self._lifecycle_pattern.first_group(line)

    def find_method_name(self, line: str) -> str | None:
        """Find the name of a ``void`` method declared on a line."""
        return METHOD_HEADER.first_group(line)

    def find_all_method_names(self, lines: Sequence[str]) -> list[str]:
        """Find the names of all ``void`` methods, in order, duplicates kept."""
        names = []
        for text in lines:
            name = self.find_method_name(text)
            if name is not None:
                names.append(name)
        return names

    # ----------------------------------------------------------------
    # Blocks
    # ----------------------------------------------------------------

    def find_opening_brace(self, lines: Sequence[str], from_line: int) -> int | None:
        """Find the first line at or after ``from_line`` with an opening brace."""
        return braces.find_first_opening(lines, from_line)

    def find_matching_closing_brace(
        self, lines: Sequence[str], open_line: int
    ) -> int | None:
        """Find the line closing the block opened at ``open_line``."""
        return braces.find_closing(lines, open_line)

    def is_at_block_top_level(
        self, lines: Sequence[str], open_line: int, target_line: int
    ) -> bool:
        """Check if a line sits directly inside the block opened at ``open_line``."""
        return braces.is_top_level_line(lines, open_line, target_line)

    def find_component_body(self, lines: Sequence[str]) -> tuple[int, int] | None:
        """Locate the opening and closing lines of the first component class.

        Returns:
            ``(opening_line, closing_line)`` or None if any step fails.
        """
        header = self.find_component_class_header(lines)
        if header is None:
            return None
        opening = self.find_opening_brace(lines, header)
        if opening is None:
            return None
        closing = self.find_matching_closing_brace(lines, opening)
        if closing is None:
            return None
        return opening, closing

    def is_in_component_body(self, lines: Sequence[str], line: int) -> bool:
        """Check if a line is inside the first MonoBehaviour / NetworkBehaviour class.

        Both the opening and the closing brace lines are outside.
        """
        body = self.find_component_body(lines)
        if body is None:
            return False
        opening, closing = body
        return opening < line < closing
