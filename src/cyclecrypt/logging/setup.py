"""Root logger setup for the command-line tool."""

import logging
import sys

from cyclecrypt.logging.formatter import JSONLogFormatter


def configure_logging(level: str | int = logging.INFO) -> None:
    """Route all log output through one JSON handler on stderr.

    stdout carries command results only. Handlers already on the root logger
    are detached, so repeated calls do not duplicate output.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONLogFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)
