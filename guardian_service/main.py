"""Reference analysis service.

Serves the bundled dataset over the same HTTP contract as the production
analysis service, for local development of the dashboard.
"""

import logging

from fastapi import FastAPI

from guardian_dashboard.fallback_data import FallbackStore, get_fallback_store
from guardian_service.api.error_handlers import register_error_handlers
from guardian_service.api.routes_cities import router as cities_router
from guardian_service.api.routes_health import router as health_router
from guardian_service.config import settings

logger = logging.getLogger(__name__)


def create_app(store: FallbackStore | None = None) -> FastAPI:
    app = FastAPI(
        title="Light Pollution Guardian",
        description="City light-pollution analyses",
        version="0.1.0",
    )
    app.state.store = store if store is not None else get_fallback_store()

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(cities_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Reference service listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
