"""
Pytest configuration and shared test utilities.

Upstream HTTP is faked with ``httpx.MockTransport`` plugged into the real
client factory, so requests go through the same code path as in production.
"""

import httpx
import pytest

from utils.awc_client import AviationWeatherClient
from utils.http_client import create_http_client

BASE_URL = "https://awc.test/api/data"


class FakeUpstream:
    """Canned aviationweather.gov responses keyed by endpoint and query."""

    def __init__(self):
        self.routes = []
        self.requests = []

    def add(self, endpoint, *, text=None, json=None, status=200, error=None, **match):
        """Answer requests to ``endpoint`` whose params include ``match``."""
        self.routes.append((endpoint, {k: str(v) for k, v in match.items()}, text, json, status, error))
        return self

    def handler(self, request):
        endpoint = request.url.path.rsplit("/", 1)[-1]
        params = dict(request.url.params)
        self.requests.append((endpoint, params))
        for route_endpoint, match, text, json, status, error in self.routes:
            if route_endpoint != endpoint:
                continue
            if any(params.get(k) != v for k, v in match.items()):
                continue
            if error is not None:
                raise error(f"{endpoint} unreachable", request=request)
            if json is not None:
                return httpx.Response(status, json=json)
            return httpx.Response(status, text=text or "")
        return httpx.Response(404, text="not found")

    def client(self):
        http_client = create_http_client(transport=httpx.MockTransport(self.handler))
        return AviationWeatherClient(http_client, BASE_URL)

    def endpoints(self):
        return [endpoint for endpoint, _ in self.requests]


@pytest.fixture
def upstream():
    return FakeUpstream()

