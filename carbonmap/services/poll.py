# carbonmap/services/poll.py
from __future__ import annotations
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from carbonmap.config import settings
from carbonmap.services.intensity_service import FetchError, IntensityData, load_intensity
from carbonmap.services.time_utils import TimeWindow, compute_time_window, label_time_window
from carbonmap.ui.state import MapSnapshot

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PollScheduler:
    """
    Fixed-cadence poller owned by one viewing session.

    Due immediately when fresh, then every ``interval_sec`` after the previous
    trigger. A failed cycle keeps the previous snapshot. ``stop()`` cancels
    all further triggers until ``resume()``.
    """

    def __init__(
        self,
        interval_sec: int = settings.POLL_INTERVAL_SEC,
        loader: Callable[[TimeWindow], IntensityData] = load_intensity,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.interval = timedelta(seconds=interval_sec)
        self._loader = loader
        self._clock = clock
        self.snapshot: Optional[MapSnapshot] = None
        self.last_triggered: Optional[datetime] = None
        self.last_error: Optional[str] = None
        self.stopped = False

    # --- schedule ---

    def due(self, now: Optional[datetime] = None) -> bool:
        if self.stopped:
            return False
        if self.last_triggered is None:
            return True
        now = now or self._clock()
        return now - self.last_triggered >= self.interval

    def seconds_until_next(self, now: Optional[datetime] = None) -> float:
        if self.last_triggered is None:
            return 0.0
        now = now or self._clock()
        left = (self.last_triggered + self.interval - now).total_seconds()
        return max(0.0, left)

    def stop(self) -> None:
        self.stopped = True

    def resume(self) -> None:
        self.stopped = False

    # --- cycle ---

    def poll(self, now: Optional[datetime] = None) -> Optional[MapSnapshot]:
        """Run one fetch-transform cycle; never raises on fetch failure."""
        now = now or self._clock()
        self.last_triggered = now
        window = compute_time_window(now)
        try:
            data = self._loader(window)
        except FetchError as exc:
            self.last_error = str(exc)
            logger.warning("Error fetching carbon intensity data (%s): %s",
                           label_time_window(window), exc)
            return self.snapshot

        self.snapshot = MapSnapshot(
            window=window,
            fetched_at=now,
            regions=data.regions,
            heat_points=data.heat_points,
        )
        self.last_error = None
        logger.info("Carbon intensity updated: %d region(s), %d heat point(s)",
                    len(data.regions), len(data.heat_points))
        return self.snapshot

    def tick(self, now: Optional[datetime] = None) -> Optional[MapSnapshot]:
        """Poll if due, then return the current snapshot."""
        now = now or self._clock()
        if self.due(now):
            return self.poll(now)
        return self.snapshot
