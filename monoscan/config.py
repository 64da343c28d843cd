"""Scanner configuration.

Settings come from three places, later ones winning:
1. Dataclass defaults
2. A dict (e.g. parsed from a project file) via ScannerConfig.from_dict
3. Environment variables via ScannerConfig.from_env

Environment:
- MONOSCAN_CATALOG: Path to a lifecycle catalog JSON file
- MONOSCAN_ENCODING: Encoding used to read source files
- MONOSCAN_MAX_FILE_SIZE: Largest source file to scan, in bytes
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

from monoscan.catalog import LifecycleCatalog, default_catalog, load_catalog
from monoscan.constants import DEFAULT_ENCODING, MAX_FILE_SIZE
from monoscan.scanner import Scanner
from monoscan.types.errors import ConfigurationError, ErrorContext, RecoveryAction

ENV_PREFIX = "MONOSCAN_"

# Environment variable for each config field.
ENV_VARS: dict[str, str] = {
    "catalog_path": ENV_PREFIX + "CATALOG",
    "encoding": ENV_PREFIX + "ENCODING",
    "max_file_size": ENV_PREFIX + "MAX_FILE_SIZE",
}


@dataclass(frozen=True)
class ScannerConfig:
    """
    Configuration parameters
    """

    catalog_path: str | None = None
    """Lifecycle catalog JSON file. None means the bundled catalog"""
    encoding: str = DEFAULT_ENCODING
    """File encoding to use when reading source files"""
    max_file_size: int = MAX_FILE_SIZE
    """Files larger than this (bytes) are refused"""

    @classmethod
    def from_dict(cls, env: Mapping[str, Any]) -> "ScannerConfig":
        """Build a config from a dict, ignoring unknown keys."""
        params = inspect.signature(cls).parameters
        return cls(**{k: v for k, v in env.items() if k in params})

    @classmethod
    def from_env(
        cls,
        base: "ScannerConfig | None" = None,
        environ: Mapping[str, str] | None = None,
    ) -> "ScannerConfig":
        """Apply MONOSCAN_* environment overrides on top of ``base``.

        Raises:
            ConfigurationError: If MONOSCAN_MAX_FILE_SIZE is not a positive integer.
        """
        config = base or cls()
        environ = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        for name, var in ENV_VARS.items():
            raw = environ.get(var)
            if raw is None or raw == "":
                continue
            if name == "max_file_size":
                overrides[name] = _parse_size(raw)
            else:
                overrides[name] = raw

        return replace(config, **overrides)

    def load_catalog(self) -> LifecycleCatalog:
        if self.catalog_path:
            return load_catalog(self.catalog_path)
        return default_catalog()

    def build_scanner(self) -> Scanner:
        """Create a Scanner over the configured catalog."""
        return Scanner(self.load_catalog())


def _parse_size(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{ENV_PREFIX}MAX_FILE_SIZE must be an integer, got {raw!r}",
            context=ErrorContext(operation="from_env"),
            recovery_actions=[RecoveryAction(f"Set {ENV_PREFIX}MAX_FILE_SIZE to a byte count")],
            original_error=e,
        ) from e
    if value <= 0:
        raise ConfigurationError(
            f"{ENV_PREFIX}MAX_FILE_SIZE must be positive, got {value}",
            context=ErrorContext(operation="from_env"),
        )
    return value
