"""
Logging setup for Monoscan.

Library code logs through loguru and never configures sinks itself.
The CLI calls configure_logging() once, which sends everything to
STDERR so that STDOUT stays clean for scan output (including --json).

Environment:
- DEBUG=true forces debug-level logging regardless of --verbose
"""

import os
import sys

from loguru import logger as loguru_logger


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get("DEBUG", "").lower() == "true"


def configure_logging(verbose: bool = False) -> None:
    """Route log output to STDERR at the appropriate level.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    level = "DEBUG" if verbose or is_debug_enabled() else "WARNING"
    loguru_logger.remove()
    loguru_logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


# Export loguru logger for direct use
logger = loguru_logger
