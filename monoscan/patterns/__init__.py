"""Line patterns used by the scanner.

Components:
- RegexPattern: Named, precompiled pattern with search helpers
- CLASS_HEADER / BASE_CLASS_CLAUSE: Generic class and base class shapes
- COMPONENT_CLASS: Class deriving from a recognized component base type
- METHOD_HEADER: void method declaration
- build_lifecycle_pattern: Alternation over lifecycle catalog names

Usage:
    from monoscan.patterns import METHOD_HEADER

    METHOD_HEADER.first_group("void Update()")  # "Update"
"""

from .regex_patterns import (
    BASE_CLASS_CLAUSE,
    BUILTIN_PATTERNS,
    CLASS_HEADER,
    COMPONENT_CLASS,
    METHOD_HEADER,
    RegexPattern,
    build_lifecycle_pattern,
)

__all__ = [
    "RegexPattern",
    "BUILTIN_PATTERNS",
    "CLASS_HEADER",
    "BASE_CLASS_CLAUSE",
    "COMPONENT_CLASS",
    "METHOD_HEADER",
    "build_lifecycle_pattern",
]
