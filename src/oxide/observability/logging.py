"""Logging setup for oxide's own loggers.

oxide only ever *emits* through named stdlib loggers (``oxide.pipeline``);
it never installs handlers on import. Applications that want to see those
records either configure logging themselves or call ``configure_logging``.

Example:
    >>> from oxide.observability import configure_logging
    >>> configure_logging()  # level/format from OXIDE_LOG_LEVEL / OXIDE_LOG_FORMAT
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from ..config import OxideSettings

ROOT_LOGGER = "oxide"
_HANDLER_NAME = "oxide-default"

# LogRecord attributes that are not user-supplied ``extra`` fields
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, event + extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        entry.update({k: v for k, v in vars(record).items() if k not in _RESERVED})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=repr)


TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: OxideSettings | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """Install a single stream handler on the ``oxide`` logger.

    Calling it again replaces the previous handler rather than adding one.
    """
    if settings is None:
        from ..config import get_settings
        settings = get_settings()

    logger = logging.getLogger(ROOT_LOGGER)
    for h in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JsonFormatter() if settings.logging.format == "json" else logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(settings.logging.level)
    return logger
