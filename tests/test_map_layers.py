import folium
from folium.plugins import HeatMap

from carbonmap.config import settings
from carbonmap.core.mapkit import heat_points, regions_frame
from carbonmap.ui.map_layers import (
    heat_layer, intensity_map, locator_map, normalized_heat_data, region_circles, region_tooltip,
)


def _children(m, kind):
    return [c for c in m._children.values() if isinstance(c, kind)]


class TestHeatLayer:
    def test_weights_scaled_against_ceiling(self):
        data = normalized_heat_data([(51.5, -0.1, 200), (52.0, -1.0, 50)])
        assert data[0][:2] == [51.5, -0.1]
        assert abs(data[0][2] - 200 / 300) < 1e-9
        assert abs(data[1][2] - 50 / 300) < 1e-9

    def test_weights_are_capped(self):
        assert normalized_heat_data([(0.0, 0.0, 900)])[0][2] == 1.0

    def test_no_points_no_layer(self):
        assert heat_layer([]) is None

    def test_layer_options(self):
        layer = heat_layer([(51.5, -0.1, 100)])
        assert isinstance(layer, HeatMap)
        assert layer.options["radius"] == settings.HEAT_RADIUS
        assert layer.options["blur"] == settings.HEAT_BLUR


class TestRegionCircles:
    def test_one_circle_per_kept_region(self, regions_payload):
        circles = region_circles(regions_frame(regions_payload))
        assert len(circles) == 3
        assert all(isinstance(c, folium.Circle) for c in circles)

    def test_circle_color_and_radius(self):
        df = regions_frame([{"shortname": "London", "latitude": 51.5, "longitude": -0.1,
                             "intensity": {"index": "high"}, "dataLastUpdated": "t"}])
        (circle,) = region_circles(df)
        assert circle.location == [51.5, -0.1]
        assert circle.options["color"] == "blue"
        assert circle.options["radius"] == settings.CIRCLE_RADIUS_M

    def test_tooltip_text(self, regions_payload):
        row = regions_frame(regions_payload).iloc[0]
        html = region_tooltip(row)
        assert "<strong>London</strong>" in html
        assert "Intensity: high" in html
        assert "Timestamp: 2024-05-01T11:45Z" in html

    def test_tooltip_escapes_names(self):
        df = regions_frame([{"shortname": "<b>x</b>", "latitude": 1.0, "longitude": 1.0,
                             "intensity": {"index": "low"}}])
        assert "&lt;b&gt;" in region_tooltip(df.iloc[0])

    def test_none_frame(self):
        assert region_circles(None) == []


class TestMaps:
    def test_intensity_map_layers(self, regions_payload):
        df = regions_frame(regions_payload)
        m = intensity_map(df, heat_points(df))
        assert m.location == [settings.INTENSITY_VIEW.lat, settings.INTENSITY_VIEW.lon]
        assert len(_children(m, HeatMap)) == 1
        assert len(_children(m, folium.Circle)) == 3

    def test_intensity_map_without_data(self):
        m = intensity_map(None, [])
        assert _children(m, HeatMap) == []
        assert _children(m, folium.Circle) == []

    def test_tiles_carry_attribution(self):
        m = intensity_map(None, [])
        (tiles,) = _children(m, folium.TileLayer)
        assert "OpenStreetMap" in tiles.options["attribution"]

    def test_locator_marker(self):
        m = locator_map()
        (marker,) = _children(m, folium.Marker)
        assert marker.location == list(settings.MARKER_LOCATION)
        html = m.get_root().render()
        assert settings.MARKER_ICON_URL in html
        assert settings.MARKER_POPUP in html
