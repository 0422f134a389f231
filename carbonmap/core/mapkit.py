# carbonmap/core/mapkit.py
from __future__ import annotations
from typing import Any, Iterable, List, Tuple

import pandas as pd

from carbonmap.config import settings
from carbonmap.utils.constants import (
    COLOR_COL, INDEX_COL, KEY_COL, LAT_COL, LON_COL, NAME_COL,
    REGION_COLUMNS, UPDATED_COL, WEIGHT_COL,
)

HeatPoint = Tuple[float, float, int]


# -------------------------
# Classification lookups
# -------------------------
def intensity_weight(index: Any) -> int:
    """moderate → 100, high → 200, anything else → 50."""
    if not isinstance(index, str):
        return settings.DEFAULT_WEIGHT
    return settings.INTENSITY_WEIGHTS.get(index, settings.DEFAULT_WEIGHT)


def intensity_color(index: Any) -> str:
    if not isinstance(index, str):
        return settings.DEFAULT_COLOR
    return settings.INTENSITY_COLORS.get(index, settings.DEFAULT_COLOR)


# -------------------------
# Record flattening
# -------------------------
def _flatten(region: Any) -> dict:
    if not isinstance(region, dict):
        return {}
    intensity = region.get("intensity")
    return {
        KEY_COL: region.get("regionid"),
        NAME_COL: region.get("shortname"),
        LAT_COL: region.get("latitude"),
        LON_COL: region.get("longitude"),
        INDEX_COL: intensity.get("index") if isinstance(intensity, dict) else None,
        UPDATED_COL: region.get("dataLastUpdated"),
    }


def regions_frame(regions: Iterable[Any]) -> pd.DataFrame:
    """
    Region records → overlay frame.

    Rows without latitude, longitude or intensity index are dropped; kept rows
    get the heat weight and circle color of their classification.
    """
    df = pd.DataFrame([_flatten(r) for r in regions], columns=REGION_COLUMNS)

    for c in (LAT_COL, LON_COL):
        df[c] = pd.to_numeric(df[c], errors="coerce")
    df = df.dropna(subset=[LAT_COL, LON_COL, INDEX_COL]).reset_index(drop=True)

    df[WEIGHT_COL] = df[INDEX_COL].map(intensity_weight).astype("int64")
    df[COLOR_COL] = df[INDEX_COL].map(intensity_color).astype(object)
    return df


def heat_points(df: pd.DataFrame) -> List[HeatPoint]:
    """Overlay frame → [(lat, lon, weight), ...] in row order."""
    if df is None or df.empty:
        return []
    return list(zip(df[LAT_COL].tolist(), df[LON_COL].tolist(), df[WEIGHT_COL].tolist()))


def classification_counts(df: pd.DataFrame) -> dict:
    """Number of kept regions per intensity label, most frequent first."""
    if df is None or df.empty:
        return {}
    return {str(k): int(v) for k, v in df[INDEX_COL].value_counts().items()}
