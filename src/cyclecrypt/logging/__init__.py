"""Structured logging: JSON formatter and setup."""

from cyclecrypt.logging.formatter import JSONLogFormatter
from cyclecrypt.logging.setup import configure_logging

__all__ = ["JSONLogFormatter", "configure_logging"]
