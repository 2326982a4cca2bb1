from __future__ import annotations

import pytest
import requests

from geoprice import create_app
from geoprice.geolocation import GeoCache, GeolocationResolver
from geoprice.service import PricingOrchestrator


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, body_error: Exception | None = None) -> None:
        self.payload = payload
        self.status_code = status_code
        self.body_error = body_error

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self.body_error is not None:
            raise self.body_error
        return self.payload


class FakeGeoApi:
    """Stands in for the IP geolocation provider; unknown IPs fail to connect."""

    def __init__(self) -> None:
        self.responses: dict[str, object] = {}
        self.calls: list[dict] = []

    def get(self, url, timeout=None, headers=None, **kwargs):
        self.calls.append({"url": url, "timeout": timeout, "headers": headers})
        for ip, outcome in self.responses.items():
            if f"/{ip}/" in url:
                if isinstance(outcome, Exception):
                    raise outcome
                if isinstance(outcome, FakeResponse):
                    return outcome
                return FakeResponse(outcome)
        raise requests.ConnectionError(f"no route to {url}")


class FakeClock:
    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def geo_api(monkeypatch) -> FakeGeoApi:
    api = FakeGeoApi()
    monkeypatch.setattr("geoprice.geolocation.requests.get", api.get)
    return api


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def resolver(clock) -> GeolocationResolver:
    return GeolocationResolver(lookup_url="https://geo.test/{ip}/json/", cache=GeoCache(clock=clock))


@pytest.fixture()
def orchestrator(resolver) -> PricingOrchestrator:
    return PricingOrchestrator(resolver=resolver)


@pytest.fixture()
def app():
    return create_app("config.TestConfig")


@pytest.fixture()
def client(app):
    return app.test_client()
