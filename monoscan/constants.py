"""Shared constants for Monoscan.

Centralizes the recognized component base types, the brace characters
used by depth tracking, and file-reading limits.
"""

# Base types that make a class a component class. Exactly these two.
COMPONENT_BASE_TYPES: tuple[str, ...] = ("MonoBehaviour", "NetworkBehaviour")

OPENING_BRACE = "{"
CLOSING_BRACE = "}"

# Characters that end the class header region during the upward walk
# of an enclosing base class lookup.
HEADER_DISQUALIFIERS: tuple[str, ...] = ('"', "'", ";", CLOSING_BRACE)

# Maximum file size to scan from disk (1 MB).
MAX_FILE_SIZE: int = 1_000_000

DEFAULT_ENCODING = "utf-8"

# Bundled catalog resource inside the ``monoscan.data`` package.
DEFAULT_CATALOG_RESOURCE = "unity_messages.json"

# Source file glob patterns scanned by directory-level CLI commands.
DEFAULT_SOURCE_PATTERNS: list[str] = ["**/*.cs"]

# Directories skipped when walking a project tree.
DEFAULT_IGNORE_DIRS: set[str] = {
    ".git",
    ".vs",
    ".idea",
    "Library",
    "Temp",
    "Obj",
    "obj",
    "Build",
    "Builds",
    "Logs",
}
