"""API client with logging and response time tracking."""

import asyncio
import json
import logging
import time

import httpx

from guardian_dashboard.config import settings
from guardian_dashboard.errors import NetworkError, ParseError, ServiceError

logger = logging.getLogger("guardian_dashboard.api")


class ApiClient:
    """Async GET client for the analysis service.

    Failures are raised as NetworkError / ServiceError / ParseError, never as
    raw httpx exceptions.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.api_base).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=transport,
        )

    async def get(self, path: str, timeout: float | None = None) -> httpx.Response:
        """GET returning the raw 2xx response.

        `timeout` bounds the whole request, not just each connect/read phase.
        """
        timeout = timeout if timeout is not None else self.timeout
        t0 = time.monotonic()
        try:
            r = await asyncio.wait_for(self._client.get(path, timeout=timeout), timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            elapsed = (time.monotonic() - t0) * 1000
            logger.warning("GET %s timed out (%.0fms)", path, elapsed)
            raise NetworkError(f"GET {path} timed out") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            elapsed = (time.monotonic() - t0) * 1000
            logger.warning("GET %s failed (%.0fms): %s", path, elapsed, e)
            raise NetworkError(f"GET {path} failed: {e}") from e

        elapsed = (time.monotonic() - t0) * 1000
        if not r.is_success:
            logger.warning("GET %s → %d (%.0fms)", path, r.status_code, elapsed)
            raise ServiceError(f"GET {path} returned {r.status_code}", status_code=r.status_code)

        logger.debug("GET %s → %d (%.0fms)", path, r.status_code, elapsed)
        return r

    async def get_json(self, path: str, timeout: float | None = None):
        """GET request to the analysis service, decoded as JSON."""
        r = await self.get(path, timeout=timeout)
        try:
            return r.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("GET %s: invalid JSON payload: %s", path, e)
            raise ParseError(f"GET {path}: invalid JSON") from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
