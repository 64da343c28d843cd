"""Line-level regex patterns for component class scanning.

Every pattern here is applied to a single physical line with search
semantics (a match may start anywhere in the line). None of them are
anchored, so a header preceded by modifiers such as ``public sealed``
still matches.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from monoscan.constants import COMPONENT_BASE_TYPES


@dataclass(frozen=True)
class RegexPattern:
    """A named regex pattern with metadata."""

    name: str
    pattern: str
    flags: int = 0
    description: str = ""
    _compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.pattern, self.flags))

    @property
    def compiled(self) -> re.Pattern:
        return self._compiled

    def matches(self, line: str) -> bool:
        return self._compiled.search(line) is not None

    def first_group(self, line: str) -> str | None:
        """Return the first capture group of the first match, or None."""
        match = self._compiled.search(line)
        if match is None:
            return None
        return match.group(1)


# A '|' inside the terminator class is matched literally.
CLASS_HEADER = RegexPattern(
    name="class_header",
    pattern=r"class\s*(.*?)[\s|,{]",
    description="Generic class declaration: class <name> <terminator>",
)

# End of line terminates too, so "class Foo : Bar" captures "Bar".
BASE_CLASS_CLAUSE = RegexPattern(
    name="base_class_clause",
    pattern=r"class.*:\s*(.*?)(?:[\s|,{]|$)",
    description="Base class clause on a class declaration line",
)

COMPONENT_CLASS = RegexPattern(
    name="component_class",
    pattern=r"class.*: *(" + "|".join(COMPONENT_BASE_TYPES) + r")",
    description="Class declaring MonoBehaviour or NetworkBehaviour as base",
)

METHOD_HEADER = RegexPattern(
    name="method_header",
    pattern=r"void *(.*?) *\(.*\)",
    description="void-returning method declaration",
)

BUILTIN_PATTERNS: dict[str, RegexPattern] = {
    p.name: p
    for p in (CLASS_HEADER, BASE_CLASS_CLAUSE, COMPONENT_CLASS, METHOD_HEADER)
}


def build_lifecycle_pattern(names: Iterable[str]) -> RegexPattern:
    """Build the single alternation pattern matching any lifecycle method.

    Each name is escaped, so names are always matched literally. An empty
    name list yields a pattern that never matches.

    Args:
        names: Lifecycle method names, in catalog order.

    Returns:
        Compiled pattern for ``void <one of names>(...)``.
    """
    alternatives = [re.escape(name) for name in names]
    if not alternatives:
        # (?!) always fails.
        return RegexPattern(
            name="lifecycle_method",
            pattern=r"(?!)",
            description="Empty lifecycle catalog",
        )

    return RegexPattern(
        name="lifecycle_method",
        pattern=r"void *(" + "|".join(alternatives) + r") *\(.*\)",
        description=f"void method named after one of {len(alternatives)} lifecycle messages",
    )
