"""Application state management: view state, selection, current analysis."""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

from guardian_dashboard.errors import DataUnavailable, EmptySelection, GuardianError
from guardian_dashboard.loaders import AnalysisFetcher, CatalogLoader, fetch_service_status
from guardian_dashboard.models.analysis import Analysis
from guardian_dashboard.models.city import City
from guardian_dashboard.models.status import ServiceStatus
from guardian_dashboard.resilience.connectivity import AvailabilityMonitor

logger = logging.getLogger("guardian_dashboard.state")


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    ERROR = "error"


class AppState:
    """Centralized app state: catalog, selected city, current analysis.

    Every LOADING transition is closed by exactly one LOADED, ERROR or EMPTY.
    Each selection bumps a request generation; a fetch result is only
    committed if its generation is still current when it resolves, so a slow
    reply for a superseded city never overwrites the selected one.
    """

    def __init__(self, monitor: AvailabilityMonitor, catalog: CatalogLoader,
                 fetcher: AnalysisFetcher, default_city: str | None = None):
        self.monitor = monitor
        self.catalog = catalog
        self.fetcher = fetcher
        self.default_city = default_city

        self.view: ViewState = ViewState.IDLE
        self.cities: list[City] = []
        self.selected_city: str | None = None
        self.analysis: Analysis | None = None
        self.error: Exception | None = None
        self.service_status: ServiceStatus | None = None

        self._generation = 0
        self._pending: asyncio.Task | None = None
        self._listeners: list[Callable[["AppState"], None]] = []

    # ========================================================
    # LISTENERS
    # ========================================================
    def subscribe(self, listener: Callable[["AppState"], None]) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def _unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return _unsubscribe

    def _set_view(self, view: ViewState) -> None:
        if view != self.view:
            logger.debug("View %s → %s (city=%s)", self.view.value, view.value, self.selected_city)
        self.view = view
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.error("State listener %r failed: %s", listener, e, exc_info=True)

    @property
    def online(self) -> bool:
        return self.monitor.signal.online

    # ========================================================
    # STARTUP / RETRY
    # ========================================================
    async def start(self) -> ViewState:
        """Probe the service, load the catalog and auto-select a city."""
        self._set_view(ViewState.LOADING)
        await self.monitor.probe()
        self.service_status = await fetch_service_status(self.catalog.client, online=self.online)
        self.cities = await self.catalog.load_cities()

        if not self.cities:
            logger.warning("City catalog is empty (service and fallback)")
            self.error = EmptySelection("No cities available")
            self._set_view(ViewState.EMPTY)
            return self.view

        await self.select(self._initial_city())
        return self.view

    async def retry(self) -> ViewState:
        """Reload everything; the only way out of EMPTY."""
        self.error = None
        return await self.start()

    def _initial_city(self) -> str:
        ids = [c.id for c in self.cities]
        for candidate in (self.selected_city, self.default_city):
            if candidate and candidate in ids:
                return candidate
        return ids[0]

    # ========================================================
    # SELECTION
    # ========================================================
    async def select(self, city_id: str) -> ViewState:
        """Select a city and load its analysis.

        An empty id is ignored: no request, no state change.
        """
        if not city_id:
            logger.debug("Empty selection ignored")
            return self.view

        self._generation += 1
        generation = self._generation
        self.selected_city = city_id
        self._set_view(ViewState.LOADING)

        try:
            analysis = await self.fetcher.fetch_analysis(city_id)
        except Exception as e:
            if not self._is_current(generation, city_id):
                logger.debug("Discarding stale failure for %s", city_id)
                return self.view
            if not isinstance(e, GuardianError):
                logger.error("Unexpected error loading %s: %s", city_id, e, exc_info=True)
            # Keep showing the previous analysis, if any
            self.error = e
            self._set_view(ViewState.ERROR)
            return self.view

        if not self._is_current(generation, city_id):
            logger.debug("Discarding stale analysis for %s (selected: %s)", city_id, self.selected_city)
            return self.view

        self.analysis = analysis
        self.error = None
        self._set_view(ViewState.LOADED)
        return self.view

    def request_selection(self, city_id: str) -> asyncio.Task | None:
        """Schedule select() and cancel the superseded in-flight selection."""
        if not city_id:
            return None
        self.cancel_pending()
        self._pending = asyncio.ensure_future(self.select(city_id))
        return self._pending

    def cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()

    def close(self) -> None:
        """Cancel in-flight work; an abandoned LOADING ends in ERROR."""
        self.cancel_pending()
        # Late results from any in-flight select() are discarded
        self._generation += 1
        if self.view == ViewState.LOADING:
            self.error = DataUnavailable(self.selected_city or "")
            self._set_view(ViewState.ERROR)

    def _is_current(self, generation: int, city_id: str) -> bool:
        return generation == self._generation and city_id == self.selected_city

    def selected(self) -> City | None:
        for c in self.cities:
            if c.id == self.selected_city:
                return c
        return None
