"""Console helpers for timestamped output."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TextIO


def format_time(now: datetime | None = None) -> str:
    """Return a ``[H:M:S] -> `` prefix for the given (or current) local time."""
    if now is None:
        now = datetime.now()
    return f"[{now.hour}:{now.minute}:{now.second}] -> "


def print_time(stream: TextIO | None = None, now: datetime | None = None) -> None:
    """Write the time prefix to ``stream`` (standard output by default)."""
    if stream is None:
        stream = sys.stdout
    stream.write(format_time(now))