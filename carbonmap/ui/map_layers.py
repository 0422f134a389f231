# carbonmap/ui/map_layers.py
from __future__ import annotations
from html import escape
from typing import List, Optional, Sequence

import folium
import numpy as np
import pandas as pd
from folium.plugins import HeatMap

from carbonmap.config import settings
from carbonmap.config.settings import MapView
from carbonmap.core.mapkit import HeatPoint
from carbonmap.utils.constants import (
    COLOR_COL, INDEX_COL, LAT_COL, LON_COL, NAME_COL, UPDATED_COL,
)


def base_map(view: MapView) -> folium.Map:
    return folium.Map(
        location=[view.lat, view.lon],
        zoom_start=view.zoom,
        tiles=settings.TILE_URL,
        attr=settings.TILE_ATTRIBUTION,
        control_scale=True,
    )


def normalized_heat_data(points: Sequence[HeatPoint], ceiling: float = settings.HEAT_MAX) -> List[list]:
    """Scale weights into [0, 1] against ``ceiling`` (leaflet.heat max)."""
    if not points:
        return []
    arr = np.asarray(points, dtype="float64")
    arr[:, 2] = np.clip(arr[:, 2] / float(ceiling), 0.0, 1.0)
    return arr.tolist()


def heat_layer(points: Sequence[HeatPoint]) -> Optional[HeatMap]:
    data = normalized_heat_data(points)
    if not data:
        return None
    return HeatMap(
        data,
        name="Heat",
        radius=settings.HEAT_RADIUS,
        blur=settings.HEAT_BLUR,
        gradient=settings.HEAT_GRADIENT,
    )


def region_tooltip(row: pd.Series) -> str:
    return (
        f"<div><strong>{escape(str(row[NAME_COL]))}</strong>"
        f"<p>Intensity: {escape(str(row[INDEX_COL]))}</p>"
        f"<p>Timestamp: {escape(str(row[UPDATED_COL]))}</p></div>"
    )


def region_circles(regions: pd.DataFrame) -> List[folium.Circle]:
    circles = []
    if regions is None or regions.empty:
        return circles
    for _, row in regions.iterrows():
        circles.append(
            folium.Circle(
                location=[float(row[LAT_COL]), float(row[LON_COL])],
                radius=settings.CIRCLE_RADIUS_M,
                color=row[COLOR_COL],
                fill=True,
                fill_color=row[COLOR_COL],
                fill_opacity=settings.CIRCLE_FILL_OPACITY,
                tooltip=folium.Tooltip(region_tooltip(row)),
            )
        )
    return circles


def intensity_map(regions: Optional[pd.DataFrame], points: Sequence[HeatPoint]) -> folium.Map:
    """UK view: heat layer (when there are points) under one circle per region."""
    m = base_map(settings.INTENSITY_VIEW)
    layer = heat_layer(points)
    if layer is not None:
        layer.add_to(m)
    for c in region_circles(regions):
        c.add_to(m)
    return m


def locator_map() -> folium.Map:
    m = base_map(settings.LOCATOR_VIEW)
    icon = folium.CustomIcon(
        icon_image=settings.MARKER_ICON_URL,
        icon_size=settings.MARKER_ICON_SIZE,
        icon_anchor=settings.MARKER_ICON_ANCHOR,
        popup_anchor=settings.MARKER_POPUP_ANCHOR,
    )
    folium.Marker(
        location=list(settings.MARKER_LOCATION),
        icon=icon,
        popup=folium.Popup(settings.MARKER_POPUP, show=True),
    ).add_to(m)
    return m
