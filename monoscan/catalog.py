"""Lifecycle message catalog.

The catalog is the ordered list of engine-invoked callbacks (Awake,
Start, Update, ...) that the scanner recognizes. It is read once when a
Scanner is built and never changes afterwards; a different catalog
means a new Scanner.

Catalog files are JSON arrays of objects:

    [
      {"name": "Awake", "description": "...", "parameters": []},
      {"name": "OnTriggerEnter", "parameters": ["Collider other"]}
    ]

Only ``name`` is required. Duplicate or empty names are accepted as-is.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

from monoscan.constants import DEFAULT_CATALOG_RESOURCE
from monoscan.types.errors import (
    CatalogError,
    ErrorCode,
    ErrorContext,
    RecoveryAction,
    ResourceError,
)
from monoscan.utils.logger import logger


@dataclass(frozen=True)
class LifecycleMessage:
    """A single engine-invoked lifecycle callback."""

    name: str
    description: str = ""
    parameters: tuple[str, ...] = ()

    @property
    def signature(self) -> str:
        """C# declaration stub for this message."""
        return f"void {self.name}({', '.join(self.parameters)})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": list(self.parameters),
        }


class LifecycleCatalog:
    """Immutable, ordered collection of lifecycle messages."""

    def __init__(self, messages: Iterable[LifecycleMessage]) -> None:
        self._messages: tuple[LifecycleMessage, ...] = tuple(messages)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        source: str | None = None,
    ) -> "LifecycleCatalog":
        """Build a catalog from mappings with at least a ``name`` key.

        Args:
            records: Catalog records, in order.
            source: Where the records came from (for error reporting).

        Returns:
            LifecycleCatalog with one message per record.

        Raises:
            CatalogError: If a record is not a mapping or has no name.
        """
        messages = []
        for index, record in enumerate(records):
            if not isinstance(record, Mapping) or "name" not in record:
                raise CatalogError(
                    f"Catalog record {index} has no 'name' field: {record!r}",
                    user_message="Every lifecycle catalog entry needs a name.",
                    code=ErrorCode.CATALOG_RECORD_INVALID,
                    context=ErrorContext(
                        operation="load_catalog",
                        file_path=source,
                        additional_info={"record_index": index},
                    ),
                )
            messages.append(
                LifecycleMessage(
                    name=str(record["name"]),
                    description=str(record.get("description", "")),
                    parameters=tuple(str(p) for p in record.get("parameters", ())),
                )
            )
        return cls(messages)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(m.name for m in self._messages)

    def get(self, name: str) -> LifecycleMessage | None:
        """Get the first message with this name, if any."""
        for message in self._messages:
            if message.name == name:
                return message
        return None

    def __iter__(self) -> Iterator[LifecycleMessage]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, name: object) -> bool:
        return any(m.name == name for m in self._messages)

    def __repr__(self) -> str:
        return f"LifecycleCatalog({len(self._messages)} messages)"


def _parse_catalog(text: str, source: str) -> LifecycleCatalog:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogError(
            f"Catalog {source} is not valid JSON: {e}",
            context=ErrorContext(operation="load_catalog", file_path=source),
            recovery_actions=[RecoveryAction("Check the catalog file for syntax errors")],
            original_error=e,
        ) from e

    if not isinstance(data, list):
        raise CatalogError(
            f"Catalog {source} must be a JSON array, got {type(data).__name__}",
            context=ErrorContext(operation="load_catalog", file_path=source),
        )

    return LifecycleCatalog.from_records(data, source=source)


def load_catalog(path: str | Path) -> LifecycleCatalog:
    """Load a lifecycle catalog from a JSON file.

    Raises:
        ResourceError: If the file cannot be read.
        CatalogError: If the content is not a valid catalog.
    """
    catalog_path = Path(path)
    try:
        text = catalog_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ResourceError(
            f"Catalog file not found: {catalog_path}",
            user_message="Lifecycle catalog file not found.",
            context=ErrorContext(operation="load_catalog", file_path=str(catalog_path)),
            recovery_actions=[
                RecoveryAction("Unset MONOSCAN_CATALOG to use the bundled catalog"),
            ],
            original_error=e,
        ) from e
    except OSError as e:
        raise ResourceError(
            f"Cannot read catalog file {catalog_path}: {e}",
            user_message="Lifecycle catalog file could not be read.",
            code=ErrorCode.FILE_READ_FAILED,
            context=ErrorContext(operation="load_catalog", file_path=str(catalog_path)),
            original_error=e,
        ) from e

    catalog = _parse_catalog(text, str(catalog_path))
    logger.debug(f"Loaded {len(catalog)} lifecycle messages from {catalog_path}")
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> LifecycleCatalog:
    """The bundled Unity MonoBehaviour message catalog."""
    text = (
        resources.files("monoscan.data")
        .joinpath(DEFAULT_CATALOG_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return _parse_catalog(text, DEFAULT_CATALOG_RESOURCE)
