"""Command line interface for Monoscan."""
