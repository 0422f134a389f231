# carbonmap/ui/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

import pandas as pd

from carbonmap.core.mapkit import HeatPoint
from carbonmap.services.time_utils import TimeWindow


@dataclass(frozen=True, eq=False)
class MapSnapshot:
    """Everything one successful poll puts on screen. Replaced whole, never edited."""
    window: TimeWindow
    fetched_at: datetime
    regions: pd.DataFrame
    heat_points: List[HeatPoint] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return self.regions.empty


SCHEDULER_KEY = "carbonmap_scheduler"


def get_scheduler(session_state, factory):
    """Per-session scheduler; created on first use, dropped with the session."""
    if SCHEDULER_KEY not in session_state:
        session_state[SCHEDULER_KEY] = factory()
    return session_state[SCHEDULER_KEY]
