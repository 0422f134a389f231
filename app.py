# app.py — Carbon Intensity Map

from __future__ import annotations
import logging
import streamlit as st
from streamlit_autorefresh import st_autorefresh
from streamlit_folium import st_folium

# ── Project components
from carbonmap.components.config import APP_NAME, LOG_LEVEL
from carbonmap.components.last_update import show_last_update_badge
from carbonmap.config import settings
from carbonmap.core.mapkit import classification_counts
from carbonmap.services.poll import PollScheduler
from carbonmap.services.time_utils import label_time_window
from carbonmap.ui.map_layers import intensity_map, locator_map
from carbonmap.ui.state import get_scheduler
from carbonmap.utils.constants import INDEX_COL, NAME_COL, UPDATED_COL, WEIGHT_COL
from carbonmap.utils.deck import build_intensity_deck

logging.basicConfig(
    level=getattr(logging, str(LOG_LEVEL).upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ── Page
st.set_page_config(page_title=APP_NAME, layout="wide")
st.title(APP_NAME)

scheduler: PollScheduler = get_scheduler(st.session_state, PollScheduler)

# ── Sidebar
live = st.sidebar.toggle("Live updates", value=True, key="live_updates")
if live:
    scheduler.resume()
else:
    scheduler.stop()

renderer = st.sidebar.radio("Renderer", ["Leaflet", "Deck"], horizontal=True, key="renderer")

if st.sidebar.button("↻ Reload now", use_container_width=True):
    snapshot = scheduler.poll()
else:
    snapshot = scheduler.tick()

# Browser-side timer; goes away with the session (or while updates are paused).
if not scheduler.stopped:
    st_autorefresh(interval=settings.AUTOREFRESH_TICK_SEC * 1000, key="carbonmap_tick")

# ── Status
if snapshot is not None:
    show_last_update_badge(
        window_label=label_time_window(snapshot.window),
        fetched_at=snapshot.fetched_at,
        next_in_sec=None if scheduler.stopped else scheduler.seconds_until_next(),
    )
if scheduler.last_error:
    st.caption(f"Last poll failed; showing previous data. ({scheduler.last_error})")

# ── Locator map
st_folium(locator_map(), height=settings.LOCATOR_HEIGHT_PX, use_container_width=True,
          returned_objects=[], key="locator_map")

# ── Intensity map
regions = snapshot.regions if snapshot is not None else None
points = snapshot.heat_points if snapshot is not None else []

if snapshot is None:
    st.info("Carbon intensity data is not available yet. The map will fill in on the next successful poll.")

if renderer == "Deck":
    st.pydeck_chart(build_intensity_deck(regions, points), use_container_width=True)
else:
    st_folium(intensity_map(regions, points), height=settings.MAP_HEIGHT_PX, use_container_width=True,
              returned_objects=[], key="intensity_map")

# ── KPIs & table
if snapshot is not None and not snapshot.empty:
    counts = classification_counts(snapshot.regions)
    cols = st.columns(max(1, len(counts)))
    for col, (label, n) in zip(cols, counts.items()):
        col.metric(label.capitalize(), n)

    with st.expander("Region table"):
        st.dataframe(
            snapshot.regions[[NAME_COL, INDEX_COL, WEIGHT_COL, UPDATED_COL]]
            .sort_values(WEIGHT_COL, ascending=False),
            use_container_width=True,
        )
