"""
Configuration Tests

Tests for ScannerConfig defaults, dict loading and environment overrides.
"""

from pathlib import Path

import pytest

from monoscan.config import ScannerConfig
from monoscan.constants import MAX_FILE_SIZE
from monoscan.scanner import Scanner
from monoscan.types import ConfigurationError, ResourceError


class TestScannerConfig:
    """Tests for ScannerConfig construction."""

    def test_defaults(self):
        config = ScannerConfig()
        assert config.catalog_path is None
        assert config.encoding == "utf-8"
        assert config.max_file_size == MAX_FILE_SIZE

    def test_from_dict_ignores_unknown_keys(self):
        config = ScannerConfig.from_dict({"encoding": "latin-1", "colour": "blue"})
        assert config.encoding == "latin-1"
        assert not hasattr(config, "colour")

    def test_from_env_overrides(self):
        config = ScannerConfig.from_env(
            environ={
                "MONOSCAN_CATALOG": "catalog.json",
                "MONOSCAN_ENCODING": "utf-16",
                "MONOSCAN_MAX_FILE_SIZE": "2048",
            }
        )
        assert config.catalog_path == "catalog.json"
        assert config.encoding == "utf-16"
        assert config.max_file_size == 2048

    def test_from_env_keeps_base(self):
        base = ScannerConfig(encoding="latin-1")
        assert ScannerConfig.from_env(base, environ={}) == base

    def test_empty_env_value_ignored(self):
        config = ScannerConfig.from_env(environ={"MONOSCAN_ENCODING": ""})
        assert config.encoding == "utf-8"

    @pytest.mark.parametrize("raw", ["big", "0", "-5"])
    def test_invalid_size(self, raw: str):
        with pytest.raises(ConfigurationError):
            ScannerConfig.from_env(environ={"MONOSCAN_MAX_FILE_SIZE": raw})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MONOSCAN_ENCODING", "ascii")
        assert ScannerConfig.from_env().encoding == "ascii"


class TestBuildScanner:
    """Tests for ScannerConfig.build_scanner."""

    def test_default_catalog(self):
        scanner = ScannerConfig().build_scanner()
        assert isinstance(scanner, Scanner)
        assert scanner.has_lifecycle_method("void FixedUpdate()")

    def test_custom_catalog(self, catalog_file: Path):
        scanner = ScannerConfig(catalog_path=str(catalog_file)).build_scanner()
        assert scanner.lifecycle_names == ("Awake", "Start", "Update", "OnDestroy")
        assert not scanner.has_lifecycle_method("void FixedUpdate()")

    def test_missing_catalog(self, tmp_path: Path):
        with pytest.raises(ResourceError):
            ScannerConfig(catalog_path=str(tmp_path / "missing.json")).build_scanner()
