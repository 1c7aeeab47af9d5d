"""util.py

Small, shared helpers used across the project:

- Debug: the trace collaborator every hash table operation writes to.
- configure_logging: one-time console setup for those traces.
- Input normalization for lines typed at the menu and for payloads.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from models import PAYLOAD_CAPACITY


LOGGER_NAME = 'chained_hash'
DEBUG_FORMAT = 'DEBUG %(message)s'

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(stream=None) -> logging.Logger:
    """Send trace lines to stdout (or `stream`) as 'DEBUG <message>'.

    Safe to call more than once; the previous handler is replaced.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger


class Debug:
    """Debug trace switch.

    The switch is latched exactly once: either at construction, or by the first
    call to on(). After that, on() ignores its argument and reports the latched
    value, so nothing later in the run can turn tracing on or off.
    """

    def __init__(self, enabled: Optional[bool] = None, log: Optional[logging.Logger] = None):
        self._latched: Optional[bool] = None if enabled is None else bool(enabled)
        self._log = log if log is not None else logger

    def on(self, flag: bool = False) -> bool:
        if self._latched is None:
            self._latched = bool(flag)
        return self._latched

    @property
    def enabled(self) -> bool:
        return bool(self._latched)

    def __call__(self, fmt: str, *args) -> int:
        """Emit one trace line when tracing is on.

        Returns the number of characters in the message (0 when off).
        """
        if not self.on():
            return 0
        message = fmt % args if args else fmt
        self._log.debug('%s', message)
        return len(message)


# -------------------------
# Input normalization helpers
# -------------------------

def strip_line_ending(line: str) -> str:
    """Cut the line at its first CR or LF, like the menu's raw line reads."""
    for i, ch in enumerate(line):
        if ch in '\r\n':
            return line[:i]
    return line


def truncate_payload(key: str, capacity: int = PAYLOAD_CAPACITY) -> str:
    """Return `key` cut to `capacity` characters (silently)."""
    return key[:capacity]
