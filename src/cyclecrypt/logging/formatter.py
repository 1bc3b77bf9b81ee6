"""Single-line JSON rendering of log records."""

import json
import logging
from datetime import UTC, datetime

from cyclecrypt.constants import SERVICE_NAME

# Attributes callers attach with ``extra=``. Only these are copied into the
# output; nothing else on the record (arguments, tokens) is serialized.
STRUCTURED_FIELDS = ("operation", "error", "ciphertext_bytes")


class JSONLogFormatter(logging.Formatter):
    """Render a record as one JSON object per line.

    ``operation`` is the CLI command being run, ``error`` the class name of the
    domain exception being reported, ``ciphertext_bytes`` the size of a token
    that failed verification.
    """

    def __init__(self, service: str = SERVICE_NAME) -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        entry: dict[str, object] = {
            "ts": created.isoformat(timespec="milliseconds"),
            "level": record.levelname.lower(),
            "service": self._service,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(
            (field, getattr(record, field)) for field in STRUCTURED_FIELDS if getattr(record, field, None) is not None
        )
        if record.exc_info and record.exc_info[1] is not None:
            entry["traceback"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)
