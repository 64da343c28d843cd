"""Services composing scanner queries into file-level results."""

from .analysis_service import AnalysisService, FileReport

__all__ = ["AnalysisService", "FileReport"]
