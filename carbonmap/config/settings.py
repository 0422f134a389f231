# carbonmap/config/settings.py
from dataclasses import dataclass
from typing import Dict, List, Tuple


# === Time window & polling ===
WINDOW_MINUTES: int = 30            # [now - 30min, now]
POLL_INTERVAL_SEC: int = 300        # 5 min
AUTOREFRESH_TICK_SEC: int = 30      # browser rerun tick; the scheduler decides if a poll is due
HTTP_TIMEOUT_SEC: float = 30.0


# === Classification -> heat weight ===
# Anything not listed (including "low" and unknown labels) falls back to DEFAULT_WEIGHT.
INTENSITY_WEIGHTS: Dict[str, int] = {
    "moderate": 100,
    "high": 200,
}
DEFAULT_WEIGHT: int = 50


# === Classification -> circle color ===
INTENSITY_COLORS: Dict[str, str] = {
    "moderate": "green",
    "high": "blue",
}
DEFAULT_COLOR: str = "red"

# pydeck wants RGBA lists
DECK_COLORS: Dict[str, List[int]] = {
    "green": [0, 128, 0, 128],
    "blue": [0, 0, 255, 128],
    "red": [255, 0, 0, 128],
}


# === Heat layer ===
HEAT_MAX: float = 300.0
HEAT_RADIUS: int = 25
HEAT_BLUR: int = 15
HEAT_GRADIENT: Dict[float, str] = {
    0.2: "green",
    0.4: "yellow",
    0.6: "orange",
    0.8: "red",
}


# === Region circles ===
CIRCLE_RADIUS_M: float = 10_000
CIRCLE_FILL_OPACITY: float = 0.5


# === Tiles ===
TILE_URL: str = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION: str = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)
DECK_MAP_STYLE: str = "light"


# === Map views ===
@dataclass(frozen=True)
class MapView:
    lat: float
    lon: float
    zoom: int


INTENSITY_VIEW = MapView(lat=54.5, lon=-2.5, zoom=6)
LOCATOR_VIEW = MapView(lat=51.505, lon=-0.09, zoom=13)


# === Locator marker ===
MARKER_LOCATION: Tuple[float, float] = (51.5, -0.09)
MARKER_ICON_URL: str = "https://cdn-icons-png.flaticon.com/512/252/252025.png"
MARKER_ICON_SIZE: Tuple[int, int] = (32, 32)
MARKER_ICON_ANCHOR: Tuple[int, int] = (16, 32)
MARKER_POPUP_ANCHOR: Tuple[int, int] = (0, -32)
MARKER_POPUP: str = "Marker icon."


# === Page ===
MAP_HEIGHT_PX: int = 650
LOCATOR_HEIGHT_PX: int = 400
