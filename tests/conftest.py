"""
Shared fixtures for the dashboard tests.

No test reaches a real network: backends are scripted with httpx.MockTransport,
or the reference FastAPI service is mounted in-process with ASGITransport.
"""

import httpx
import pytest

from guardian_dashboard.bootstrap import Dashboard
from guardian_dashboard.config import Settings
from guardian_dashboard.fallback_data import FALLBACK_ANALYSES, FALLBACK_CITIES, FallbackStore

BASE_URL = "http://guardian.test"


class ScriptedBackend:
    """Route table for httpx.MockTransport that records every request path.

    A route is either a (status_code, json_payload) tuple or an async callable
    taking the request and returning an httpx.Response.
    """

    def __init__(self, routes: dict | None = None, down: bool = False):
        self.routes = dict(routes or {})
        self.down = down
        self.calls: list[str] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append(path)
        if self.down:
            raise httpx.ConnectError("Connection refused", request=request)
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if callable(route):
            return await route(request)
        status_code, payload = route
        return httpx.Response(status_code, json=payload)

    def analysis_calls(self) -> list[str]:
        return [p for p in self.calls if p.startswith("/api/analyze/")]


def healthy_routes() -> dict:
    routes = {
        "/": (200, {"status": "running"}),
        "/api/cities": (200, FALLBACK_CITIES),
        "/api/nasa-status": (
            200, {"data_sources_operational": ["EONET"], "active_events": 4, "asteroids_today": 7},
        ),
    }
    for city_id, payload in FALLBACK_ANALYSES.items():
        routes[f"/api/analyze/{city_id}"] = (200, payload)
    return routes


@pytest.fixture()
def test_settings(tmp_path):
    return Settings(api_base=BASE_URL, probe_timeout=1.0, request_timeout=2.0,
                    reprobe_before_fetch=False, default_city="lima",
                    log_dir=str(tmp_path / "logs"), log_level="DEBUG")


@pytest.fixture()
def store():
    return FallbackStore()


@pytest.fixture()
def backend():
    return ScriptedBackend(healthy_routes())


@pytest.fixture()
def offline_backend():
    return ScriptedBackend(down=True)


@pytest.fixture()
async def make_dashboard(test_settings, store):
    """Build a Dashboard on a scripted backend; closed after the test."""
    created: list[Dashboard] = []

    def _make(backend, settings=None, store_override=None):
        dash = Dashboard(
            settings=settings or test_settings,
            store=store_override if store_override is not None else store,
            transport=httpx.MockTransport(backend),
        )
        created.append(dash)
        return dash

    yield _make

    for dash in created:
        await dash.aclose()
