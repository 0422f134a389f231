from datetime import datetime, timedelta, timezone

from carbonmap.services.time_utils import (
    TimeWindow, compute_time_window, label_time_window, to_iso_z,
)


class TestComputeTimeWindow:
    def test_end_is_now_and_start_is_thirty_minutes_earlier(self, now):
        w = compute_time_window(now)
        assert w.end == now
        assert w.start == now - timedelta(minutes=30)

    def test_iso_strings_use_z_designator(self, now):
        w = compute_time_window(now)
        assert w.end_iso == "2024-05-01T12:00:00.000Z"
        assert w.start_iso == "2024-05-01T11:30:00.000Z"

    def test_iso_strings_parse_back(self, now):
        w = compute_time_window(now)
        assert datetime.fromisoformat(w.end_iso.replace("Z", "+00:00")) == now
        assert datetime.fromisoformat(w.start_iso.replace("Z", "+00:00")) == now - timedelta(minutes=30)

    def test_non_utc_input_is_converted(self):
        cet = timezone(timedelta(hours=2))
        w = compute_time_window(datetime(2024, 5, 1, 14, 0, tzinfo=cet))
        assert w.end_iso == "2024-05-01T12:00:00.000Z"

    def test_naive_input_is_treated_as_utc(self):
        w = compute_time_window(datetime(2024, 5, 1, 12, 0))
        assert w.end == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def test_wall_clock_default(self):
        before = datetime.now(timezone.utc)
        w = compute_time_window()
        after = datetime.now(timezone.utc)
        assert before <= w.end <= after
        assert w.end - w.start == timedelta(minutes=30)

    def test_custom_length(self, now):
        w = compute_time_window(now, minutes=60)
        assert w.start == now - timedelta(hours=1)


class TestIsoAndLabel:
    def test_milliseconds_are_kept(self):
        ts = datetime(2024, 5, 1, 12, 0, 5, 123456, tzinfo=timezone.utc)
        assert to_iso_z(ts) == "2024-05-01T12:00:05.123Z"

    def test_label(self, now):
        w = TimeWindow(start=now - timedelta(minutes=30), end=now)
        assert label_time_window(w) == "2024-05-01 11:30 UTC → 2024-05-01 12:00 UTC"
