"""
Shared fixtures for the carbonmap tests.

No test touches the network: the regional feed is faked with canned
payloads and ``requests.get`` is patched where a test needs the HTTP path.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest


@pytest.fixture()
def now():
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
def regions_payload():
    """Regions as the feed returns them inside data[0]."""
    return [
        {
            "regionid": 13,
            "shortname": "London",
            "latitude": 51.5,
            "longitude": -0.1,
            "intensity": {"forecast": 250, "index": "high"},
            "dataLastUpdated": "2024-05-01T11:45Z",
        },
        {
            "regionid": 1,
            "shortname": "North Scotland",
            "latitude": 57.5,
            "longitude": -4.2,
            "intensity": {"forecast": 10, "index": "very low"},
            "dataLastUpdated": "2024-05-01T11:45Z",
        },
        {
            "regionid": 8,
            "shortname": "West Midlands",
            "latitude": 52.5,
            "longitude": -1.9,
            "intensity": {"forecast": 160, "index": "moderate"},
            "dataLastUpdated": "2024-05-01T11:45Z",
        },
        {
            # no latitude → dropped
            "regionid": 18,
            "shortname": "GB",
            "longitude": -2.0,
            "intensity": {"forecast": 150, "index": "moderate"},
            "dataLastUpdated": "2024-05-01T11:45Z",
        },
    ]


@pytest.fixture()
def api_body(regions_payload):
    return {"data": [{"from": "2024-05-01T11:30Z", "to": "2024-05-01T12:00Z", "regions": regions_payload}]}


def make_response(body=None, status=200, json_error=None):
    """Stand-in for ``requests.Response``."""
    import requests

    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    else:
        resp.raise_for_status.return_value = None
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture()
def response_factory():
    return make_response
