# carbonmap/services/time_utils.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from carbonmap.config import settings


@dataclass(frozen=True)
class TimeWindow:
    start: datetime
    end: datetime

    @property
    def start_iso(self) -> str:
        return to_iso_z(self.start)

    @property
    def end_iso(self) -> str:
        return to_iso_z(self.end)


def to_iso_z(ts: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a trailing ``Z``."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    ts = ts.astimezone(timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def compute_time_window(now_utc: Optional[datetime] = None,
                        minutes: int = settings.WINDOW_MINUTES) -> TimeWindow:
    """Trailing window ending at ``now_utc`` (wall clock when omitted)."""
    now = now_utc or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return TimeWindow(start=now - timedelta(minutes=minutes), end=now)


def label_time_window(window: TimeWindow) -> str:
    fmt = "%Y-%m-%d %H:%M UTC"
    return f"{window.start.strftime(fmt)} → {window.end.strftime(fmt)}"
