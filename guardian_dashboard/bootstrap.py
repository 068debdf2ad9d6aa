"""Dashboard wiring: settings → client → monitor → loaders → app state.

    async with Dashboard() as dash:
        await dash.start()
        dash.state.analysis
"""

from __future__ import annotations

import logging

import httpx

from guardian_dashboard.api_client import ApiClient
from guardian_dashboard.app_state import AppState, ViewState
from guardian_dashboard.config import Settings, settings as default_settings
from guardian_dashboard.fallback_data import FallbackStore
from guardian_dashboard.loaders import AnalysisFetcher, CatalogLoader
from guardian_dashboard.logging_config import setup_logging
from guardian_dashboard.resilience.connectivity import AvailabilityMonitor, ConnectivitySignal

logger = logging.getLogger("guardian_dashboard.bootstrap")


class Dashboard:
    """Owns the HTTP client and every component built on top of it."""

    def __init__(
        self,
        settings: Settings | None = None,
        store: FallbackStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or default_settings
        self.client = ApiClient(
            base_url=self.settings.api_base,
            timeout=self.settings.request_timeout,
            transport=transport,
        )
        self.signal = ConnectivitySignal()
        self.monitor = AvailabilityMonitor(self.client, self.signal, timeout=self.settings.probe_timeout)
        reprobe = self.settings.reprobe_before_fetch
        self.catalog = CatalogLoader(self.client, self.monitor, store, reprobe=reprobe)
        self.fetcher = AnalysisFetcher(self.client, self.monitor, store, reprobe=reprobe)
        self.state = AppState(self.monitor, self.catalog, self.fetcher,
                              default_city=self.settings.default_city)

    async def start(self) -> ViewState:
        setup_logging(self.settings.log_level, self.settings.log_dir)
        logger.info("Light Pollution Guardian starting (service: %s)", self.client.base_url)
        view = await self.state.start()
        logger.info("Startup finished: view=%s online=%s cities=%d selected=%s",
                    view.value, self.signal.online, len(self.state.cities), self.state.selected_city)
        return view

    async def select(self, city_id: str) -> ViewState:
        return await self.state.select(city_id)

    async def aclose(self) -> None:
        self.state.close()
        await self.client.aclose()

    async def __aenter__(self) -> Dashboard:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
