"""Bundled data files (the default lifecycle catalog)."""
