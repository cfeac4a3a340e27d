"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
import sys


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Send log records to stderr; stdout carries the statement stream.

    ``verbose`` switches to DEBUG, which adds one line per reconciled
    transaction.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=force,
    )
