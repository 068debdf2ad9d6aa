"""Catalog loader, analysis fetcher and service-status fetch.

All three go remote-first. Catalog and analysis fall back to the bundled
store; the service status has no local copy and degrades to None.
"""

import logging
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from guardian_dashboard.api_client import ApiClient
from guardian_dashboard.config import settings
from guardian_dashboard.constants import PATH_ANALYZE, PATH_CITIES, PATH_NASA_STATUS
from guardian_dashboard.errors import REMOTE_ERRORS, DataUnavailable, EmptySelection, ParseError
from guardian_dashboard.fallback_data import FallbackStore, get_fallback_store
from guardian_dashboard.models.analysis import Analysis
from guardian_dashboard.models.city import City
from guardian_dashboard.models.status import ServiceStatus
from guardian_dashboard.resilience.connectivity import AvailabilityMonitor
from guardian_dashboard.resilience.fallback import remote_with_fallback

logger = logging.getLogger(__name__)

_city_list = TypeAdapter(list[City])


class _RemoteLoader:
    def __init__(self, client: ApiClient, monitor: AvailabilityMonitor,
                 store: FallbackStore | None = None, reprobe: bool | None = None):
        self.client = client
        self.monitor = monitor
        self.store = store if store is not None else get_fallback_store()
        self.reprobe = settings.reprobe_before_fetch if reprobe is None else reprobe

    async def _online(self) -> bool:
        if self.reprobe:
            return await self.monitor.probe()
        return self.monitor.signal.online


class CatalogLoader(_RemoteLoader):

    async def _remote_cities(self) -> list[City]:
        payload = await self.client.get_json(PATH_CITIES)
        try:
            cities = _city_list.validate_python(payload)
        except ValidationError as e:
            raise ParseError(f"Invalid city catalog: {e.error_count()} errors") from e
        if not cities:
            # An empty remote catalog would leave nothing selectable
            raise ParseError("Remote city catalog is empty")
        ids = [c.id for c in cities]
        if len(set(ids)) != len(ids):
            dupes = sorted({i for i in ids if ids.count(i) > 1})
            raise ParseError(f"Duplicate city ids in remote catalog: {dupes}")
        logger.info("Catalog: %d cities from service", len(cities))
        return cities

    async def load_cities(self) -> list[City]:
        """City list from the service, or the bundled catalog."""
        return await remote_with_fallback(
            self._remote_cities,
            self.store.cities,
            online=await self._online(),
            label="Catalog",
        )


class AnalysisFetcher(_RemoteLoader):

    async def _remote_analysis(self, city_id: str) -> Analysis:
        payload = await self.client.get_json(PATH_ANALYZE.format(city_id=quote(city_id, safe="")))
        if isinstance(payload, dict) and not payload.get("city_id") and not payload.get("id"):
            payload = {**payload, "city_id": city_id}
        try:
            analysis = Analysis.model_validate(payload)
        except ValidationError as e:
            raise ParseError(f"Invalid analysis for {city_id}: {e.error_count()} errors") from e
        if analysis.city_id != city_id:
            raise ParseError(f"Analysis for {analysis.city_id} returned when {city_id} was requested")
        return analysis

    def _fallback_analysis(self, city_id: str) -> Analysis:
        analysis = self.store.analysis(city_id)
        if analysis is None:
            logger.warning("No fallback analysis for %s", city_id)
            raise DataUnavailable(city_id)
        return analysis

    async def fetch_analysis(self, city_id: str) -> Analysis:
        """Analysis for one city.

        Raises EmptySelection for an empty id (before any request) and
        DataUnavailable when neither the service nor the store has the city.
        """
        if not city_id:
            raise EmptySelection("No city selected")
        return await remote_with_fallback(
            lambda: self._remote_analysis(city_id),
            lambda: self._fallback_analysis(city_id),
            online=await self._online(),
            label=f"Analysis {city_id}",
        )


async def fetch_service_status(client: ApiClient, online: bool = True) -> ServiceStatus | None:
    """NASA feed summary from the service, or None when unavailable."""
    if not online:
        return None
    try:
        payload = await client.get_json(PATH_NASA_STATUS)
        return ServiceStatus.model_validate(payload)
    except ValidationError as e:
        logger.warning("Invalid service status payload: %d errors", e.error_count())
    except REMOTE_ERRORS as e:
        logger.info("Service status unavailable: %s", e)
    return None
