"""Unit tests for ZipLookupService (HTTP calls are faked)."""

import pytest
import requests

from geodelta.errors import LocationLookupError
from geodelta.models import Coordinate
from geodelta.services import zip_lookup
from geodelta.services.zip_lookup import ZipLookupService


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload


@pytest.fixture
def calls(monkeypatch):
    """Route requests.get through a queue of canned responses."""
    recorded = []
    responses = []

    def fake_get(url, **kwargs):
        recorded.append((url, kwargs))
        result = responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(zip_lookup.requests, "get", fake_get)
    return recorded, responses


class TestZipToCoordinate:
    """Test suite for zip_to_coordinate()."""

    def test_parses_first_place(self, calls):
        recorded, responses = calls
        responses.append(
            FakeResponse(200, {"places": [{"latitude": "37.7879", "longitude": "-122.4075"}]})
        )

        coordinate = ZipLookupService(timeout=3).zip_to_coordinate("94108")

        assert coordinate == Coordinate(37.7879, -122.4075)
        url, kwargs = recorded[0]
        assert url == "http://api.zippopotam.us/us/94108"
        assert kwargs["timeout"] == 3

    def test_non_200_raises(self, calls):
        _, responses = calls
        responses.append(FakeResponse(404, {}))
        with pytest.raises(LocationLookupError):
            ZipLookupService().zip_to_coordinate("00000")

    def test_malformed_payload_raises(self, calls):
        _, responses = calls
        responses.append(FakeResponse(200, {"places": []}))
        with pytest.raises(LocationLookupError):
            ZipLookupService().zip_to_coordinate("94108")

    def test_network_error_raises(self, calls):
        _, responses = calls
        responses.append(requests.ConnectionError("down"))
        with pytest.raises(LocationLookupError, match="down"):
            ZipLookupService().zip_to_coordinate("94108")


class TestCityStateToZip:
    """Test suite for city_state_to_zip()."""

    def test_returns_first_post_code(self, calls):
        recorded, responses = calls
        responses.append(FakeResponse(200, {"places": [{"post code": "94102"}]}))

        assert ZipLookupService().city_state_to_zip("San Francisco, CA") == "94102"
        assert recorded[0][0] == "http://api.zippopotam.us/us/CA/San Francisco"

    def test_unknown_place_returns_none(self, calls):
        _, responses = calls
        responses.append(FakeResponse(404, {}))
        assert ZipLookupService().city_state_to_zip("Nowhere, ZZ") is None

    def test_bad_format_returns_none_without_request(self, calls):
        recorded, _ = calls
        assert ZipLookupService().city_state_to_zip("just a city") is None
        assert recorded == []

    def test_network_error_returns_none(self, calls):
        _, responses = calls
        responses.append(requests.Timeout("slow"))
        assert ZipLookupService().city_state_to_zip("Austin, TX") is None

    @pytest.mark.parametrize(
        "payload", [{"places": None}, None, {"places": [None]}, {"places": [{}]}]
    )
    def test_malformed_payload_returns_none(self, calls, payload):
        _, responses = calls
        responses.append(FakeResponse(200, payload))
        assert ZipLookupService().city_state_to_zip("Austin, TX") is None
