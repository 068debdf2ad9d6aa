"""Connectivity signal and availability monitor.

The signal starts unknown (None, read as offline). Only AvailabilityMonitor
writes it; loaders only read it.
"""

import logging
from datetime import datetime, timezone

from guardian_dashboard.api_client import ApiClient
from guardian_dashboard.config import settings
from guardian_dashboard.constants import PATH_ROOT
from guardian_dashboard.errors import REMOTE_ERRORS

logger = logging.getLogger(__name__)


class ConnectivitySignal:
    """Online/offline flag shared by the loaders of one dashboard."""

    def __init__(self):
        self._online: bool | None = None
        self.checked_at: datetime | None = None

    @property
    def online(self) -> bool:
        return bool(self._online)

    @property
    def known(self) -> bool:
        return self._online is not None

    def _set(self, online: bool) -> None:
        previous = self._online
        self._online = online
        self.checked_at = datetime.now(timezone.utc)
        if previous != online:
            logger.info("Analysis service %s", "ONLINE" if online else "OFFLINE")

    def __repr__(self) -> str:
        state = "unknown" if self._online is None else ("online" if self._online else "offline")
        return f"ConnectivitySignal({state})"


class AvailabilityMonitor:
    """Probes the service root and keeps the connectivity signal up to date."""

    def __init__(self, client: ApiClient, signal: ConnectivitySignal | None = None,
                 timeout: float | None = None):
        self.client = client
        self.signal = signal or ConnectivitySignal()
        self.timeout = timeout if timeout is not None else settings.probe_timeout

    async def probe(self) -> bool:
        """True on a 2xx from GET /. Never raises."""
        try:
            await self.client.get(PATH_ROOT, timeout=self.timeout)
            online = True
        except REMOTE_ERRORS as e:
            logger.debug("Probe failed: %s", e)
            online = False
        self.signal._set(online)
        return online
