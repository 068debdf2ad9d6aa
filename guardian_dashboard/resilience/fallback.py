"""Remote-first / fallback-second policy shared by all loaders."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from guardian_dashboard.errors import REMOTE_ERRORS

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def remote_with_fallback(
    remote: Callable[[], Awaitable[T]],
    fallback: Callable[[], T],
    *,
    online: bool,
    label: str,
) -> T:
    """Run `remote` when online; on a remote error, or when offline, return `fallback()`.

    Only NetworkError, ServiceError and ParseError are absorbed. Whatever
    `fallback` raises propagates to the caller.
    """
    if online:
        try:
            return await remote()
        except REMOTE_ERRORS as e:
            logger.info("%s: remote failed (%s: %s), using fallback data",
                        label, type(e).__name__, e)
    else:
        logger.info("%s: service offline, using fallback data", label)
    return fallback()
