"""Logging setup for command-line use."""

from __future__ import annotations

import logging
import sys


def setup_logging(level_name: str = "WARNING") -> None:
    """
    Configure logging for command-line use.

    - Logs go to stderr so generated output on stdout stays clean
    - Calling again (tests, repeated CLI invocations) only adjusts the level
    """
    level = getattr(logging, (level_name or "WARNING").upper(), logging.WARNING)
    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
