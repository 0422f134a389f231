# carbonmap/services/intensity_service.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import pandas as pd
import requests

from carbonmap.components.config import API_BASE
from carbonmap.config import settings
from carbonmap.core.mapkit import HeatPoint, heat_points, regions_frame
from carbonmap.services.time_utils import TimeWindow

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Intensity data unavailable for this cycle (network, HTTP status or payload shape)."""


@dataclass(frozen=True)
class IntensityData:
    regions: pd.DataFrame
    heat_points: List[HeatPoint]


def regional_url(window: TimeWindow, base: Optional[str] = None) -> str:
    base = (base or API_BASE).rstrip("/")
    return f"{base}/regional/intensity/{window.start_iso}/{window.end_iso}"


# --- Data access ---


def fetch_regions(window: TimeWindow, *, base: Optional[str] = None,
                  timeout: float = settings.HTTP_TIMEOUT_SEC) -> List[Any]:
    """GET the regional feed for ``window`` and return ``data[0].regions``."""
    url = regional_url(window, base)
    logger.debug("GET %s", url)
    try:
        resp = requests.get(url, headers={"Accept": "application/json"}, timeout=timeout)
        resp.raise_for_status()
        payload = resp.json()
    except requests.RequestException as exc:
        # JSON decode errors from requests also land here
        raise FetchError(f"request failed: {exc}") from exc
    except ValueError as exc:
        raise FetchError(f"invalid JSON body: {exc}") from exc

    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, list) or not data:
        raise FetchError("response has no 'data' entries")
    first = data[0]
    regions = first.get("regions") if isinstance(first, dict) else None
    if not isinstance(regions, list):
        raise FetchError("first 'data' entry has no 'regions' list")
    return regions


# --- Transform ---


def transform(regions: List[Any]) -> IntensityData:
    df = regions_frame(regions)
    dropped = len(regions) - len(df)
    if dropped:
        logger.debug("Dropped %d region(s) without position or classification", dropped)
    return IntensityData(regions=df, heat_points=heat_points(df))


def load_intensity(window: TimeWindow, **kwargs) -> IntensityData:
    """Fetch-transform stage: one request, filtered overlay frame + heat points."""
    return transform(fetch_regions(window, **kwargs))
