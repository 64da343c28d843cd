"""
File-level analysis built on top of the Scanner.

Composes scanner queries into a FileReport: where the component class
is, what it derives from, which methods it declares and which lifecycle
messages it does not implement yet. Also answers the editor question
"which lifecycle methods could be offered at this line?".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Sequence

from monoscan.catalog import LifecycleCatalog
from monoscan.config import ScannerConfig
from monoscan.constants import DEFAULT_IGNORE_DIRS, DEFAULT_SOURCE_PATTERNS
from monoscan.scanner import Scanner
from monoscan.types.core import LineRange
from monoscan.types.errors import ErrorCode, ErrorContext, ResourceError
from monoscan.utils.logger import logger


@dataclass
class FileReport:
    """Summary of one source file."""

    file_path: str
    line_count: int
    component_header: int | None = None
    base_class: str | None = None
    body: LineRange | None = None
    method_names: list[str] = field(default_factory=list)
    lifecycle_methods: list[str] = field(default_factory=list)
    missing_lifecycle_methods: list[str] = field(default_factory=list)

    @property
    def has_component(self) -> bool:
        return self.component_header is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "file_path": self.file_path,
            "line_count": self.line_count,
            "component_header": self.component_header,
            "base_class": self.base_class,
            "body": (
                {"start": self.body.start, "end": self.body.end}
                if self.body is not None
                else None
            ),
            "method_names": self.method_names,
            "lifecycle_methods": self.lifecycle_methods,
            "missing_lifecycle_methods": self.missing_lifecycle_methods,
        }


class AnalysisService:
    """Per-file analysis of component classes.

    Usage:
        service = AnalysisService.from_config(ScannerConfig.from_env())
        report = service.analyze_file("Assets/Scripts/Player.cs")
        print(report.missing_lifecycle_methods)
    """

    def __init__(self, scanner: Scanner, config: ScannerConfig | None = None):
        self._scanner = scanner
        self._config = config or ScannerConfig()

    @classmethod
    def from_config(cls, config: ScannerConfig) -> "AnalysisService":
        return cls(config.build_scanner(), config)

    @classmethod
    def from_catalog(cls, catalog: LifecycleCatalog) -> "AnalysisService":
        return cls(Scanner(catalog))

    @property
    def scanner(self) -> Scanner:
        return self._scanner

    def _implemented_lifecycle(self, lines: Sequence[str], body: tuple[int, int]) -> list[str]:
        opening, closing = body
        names = []
        for text in lines[opening + 1 : closing]:
            name = self._scanner.find_lifecycle_method_name(text)
            if name is not None:
                names.append(name)
        return names

    def _missing(self, implemented: Sequence[str]) -> list[str]:
        done = set(implemented)
        return [name for name in self._scanner.lifecycle_names if name not in done]

    def analyze(self, lines: Sequence[str], file_path: str = "") -> FileReport:
        """Analyze already-split source lines.

        Args:
            lines: Source file lines.
            file_path: Path used for reporting only.

        Returns:
            FileReport. Fields stay None when no component class is found.
        """
        report = FileReport(file_path=file_path, line_count=len(lines))
        report.method_names = self._scanner.find_all_method_names(lines)

        header = self._scanner.find_component_class_header(lines)
        if header is None:
            return report
        report.component_header = header

        body = self._scanner.find_component_body(lines)
        if body is None:
            logger.debug(f"Unbalanced component body in {file_path or '<lines>'}")
            return report

        opening, closing = body
        report.body = LineRange(opening, closing)
        report.base_class = self._scanner.get_enclosing_base_class(lines, opening + 1)
        report.lifecycle_methods = self._implemented_lifecycle(lines, body)
        report.missing_lifecycle_methods = self._missing(report.lifecycle_methods)
        return report

    def suggest_messages(self, lines: Sequence[str], line: int) -> list[str]:
        """Lifecycle methods that could be added at ``line``.

        Suggestions are only offered on a line sitting directly in the
        component class body (not inside a method). Already implemented
        messages are left out.
        """
        body = self._scanner.find_component_body(lines)
        if body is None:
            return []
        if not LineRange(*body).strictly_contains(line):
            return []
        if not self._scanner.is_at_block_top_level(lines, body[0], line):
            return []

        return self._missing(self._implemented_lifecycle(lines, body))

    def read_lines(self, path: str | Path) -> list[str]:
        """Read a source file and split it into lines.

        Raises:
            ResourceError: If the path is missing, not a file, too large
                or unreadable.
        """
        file_path = Path(path)
        context = ErrorContext(operation="read_lines", file_path=str(file_path))

        if not file_path.exists():
            raise ResourceError(f"File not found: {file_path}", context=context)
        if not file_path.is_file():
            raise ResourceError(
                f"Not a file: {file_path}",
                code=ErrorCode.INVALID_PATH,
                context=context,
            )

        try:
            size = file_path.stat().st_size
            if size > self._config.max_file_size:
                raise ResourceError(
                    f"File {file_path} is {size} bytes, limit is {self._config.max_file_size}",
                    user_message="File is too large to scan.",
                    code=ErrorCode.FILE_TOO_LARGE,
                    context=context,
                )
            content = file_path.read_text(encoding=self._config.encoding, errors="replace")
        except OSError as e:
            raise ResourceError(
                f"Cannot read {file_path}: {e}",
                code=ErrorCode.FILE_READ_FAILED,
                context=context,
                original_error=e,
            ) from e

        return content.splitlines()

    def analyze_file(self, path: str | Path) -> FileReport:
        """Read and analyze a single source file."""
        return self.analyze(self.read_lines(path), file_path=str(path))

    def iter_source_files(self, root: str | Path) -> Iterator[Path]:
        """Yield source files under ``root``, skipping build and VCS directories."""
        base = Path(root)
        for pattern in DEFAULT_SOURCE_PATTERNS:
            for file_path in sorted(base.glob(pattern)):
                if not file_path.is_file():
                    continue
                if any(part in DEFAULT_IGNORE_DIRS for part in file_path.relative_to(base).parts):
                    continue
                yield file_path

    def analyze_tree(self, root: str | Path) -> list[FileReport]:
        """Analyze every source file under a directory.

        Files that cannot be read are logged and skipped.
        """
        reports = []
        for file_path in self.iter_source_files(root):
            try:
                reports.append(self.analyze_file(file_path))
            except ResourceError as e:
                logger.warning(f"Skipping {file_path}: {e}")
        return reports
