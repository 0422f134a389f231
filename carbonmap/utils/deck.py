# carbonmap/utils/deck.py
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd
import pydeck as pdk

from carbonmap.config import settings
from carbonmap.config.settings import MapView
from carbonmap.core.mapkit import HeatPoint
from carbonmap.utils.constants import (
    COLOR_COL, INDEX_COL, LAT_COL, LON_COL, NAME_COL, UPDATED_COL,
)

_DEF = [90, 120, 140, 128]


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _circles_frame(regions: pd.DataFrame) -> pd.DataFrame:
    """Region frame → columns the ScatterplotLayer and tooltip read."""
    d = pd.DataFrame(regions).copy()
    d["_color"] = d[COLOR_COL].map(lambda k: settings.DECK_COLORS.get(k, _DEF))
    for c in (NAME_COL, INDEX_COL, UPDATED_COL):
        d[c] = d[c].fillna("").astype(str)
    return d


def _heat_frame(points: Sequence[HeatPoint]) -> pd.DataFrame:
    pts = pd.DataFrame(list(points), columns=["lat", "lon", "weight"])
    pts["weight"] = np.clip(pts["weight"].astype(float) / settings.HEAT_MAX, 0.0, 1.0)
    return pts


# -----------------------------------------------------------------------------
# Deck
# -----------------------------------------------------------------------------
def build_intensity_deck(
    regions: Optional[pd.DataFrame],
    points: Sequence[HeatPoint],
    *,
    map_style: str = settings.DECK_MAP_STYLE,
    initial_view: MapView = settings.INTENSITY_VIEW,
) -> pdk.Deck:
    """
    pydeck rendition of the intensity map: HeatmapLayer underneath,
    one ScatterplotLayer circle per region on top.
    """
    view = pdk.ViewState(
        latitude=initial_view.lat,
        longitude=initial_view.lon,
        zoom=initial_view.zoom,
    )
    layers: list[pdk.Layer] = []

    if points:
        layers.append(
            pdk.Layer(
                "HeatmapLayer",
                data=_heat_frame(points),
                get_position="[lon, lat]",
                get_weight="weight",
                radius_pixels=settings.HEAT_RADIUS * 2,
                aggregation="SUM",
            )
        )

    if regions is not None and not regions.empty:
        layers.append(
            pdk.Layer(
                "ScatterplotLayer",
                data=_circles_frame(regions),
                pickable=True,
                get_position=f"[{LON_COL}, {LAT_COL}]",
                get_radius=settings.CIRCLE_RADIUS_M,
                get_fill_color="_color",
                stroked=True,
                get_line_color="_color",
            )
        )

    tooltip = {
        "html": (
            f"<b>{{{NAME_COL}}}</b><br>"
            f"Intensity: {{{INDEX_COL}}}<br>"
            f"Timestamp: {{{UPDATED_COL}}}"
        ),
        "style": {"backgroundColor": "rgba(0,0,0,0.78)", "color": "white"},
    }
    return pdk.Deck(layers=layers, initial_view_state=view, map_style=map_style, tooltip=tooltip)
