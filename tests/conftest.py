"""Shared test fixtures."""

import httpx
import pytest
from starlette.testclient import TestClient

from cwaweather.app import create_app
from cwaweather.config import Settings


def make_element(name, values, start="2026-10-19 18:00:00"):
    """One upstream weatherElement with a time slot per value."""
    return {
        "elementName": name,
        "time": [
            {
                "startTime": f"{start}#{i}",
                "endTime": f"{start}#{i + 1}",
                "parameter": {"parameterName": value},
            }
            for i, value in enumerate(values)
        ],
    }


def make_payload(*locations, description="三十六小時天氣預報"):
    """Upstream F-C0032-001 body; each location is (name, [elements])."""
    return {
        "success": "true",
        "records": {
            "datasetDescription": description,
            "location": [
                {"locationName": name, "weatherElement": elements}
                for name, elements in locations
            ],
        },
    }


@pytest.fixture
def settings():
    return Settings(_env_file=None, cwa_api_key="test-key")


@pytest.fixture
def upstream():
    """Fake CWA upstream. Set ``.response`` and inspect ``.requests``."""

    class FakeUpstream:
        def __init__(self):
            self.requests = []
            self.response = httpx.Response(200, json=make_payload())

        def __call__(self, request):
            self.requests.append(request)
            if isinstance(self.response, Exception):
                raise self.response
            # Fresh copy so the same canned response can be served repeatedly.
            return httpx.Response(
                self.response.status_code,
                headers=self.response.headers,
                content=self.response.content,
            )

    return FakeUpstream()


@pytest.fixture
def make_client(upstream):
    """Factory for a TestClient around an app with the fake upstream."""

    def _make(settings):
        app = create_app(settings, transport=httpx.MockTransport(upstream))
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_client, settings):
    return make_client(settings)
