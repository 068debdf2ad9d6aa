from datetime import datetime, timezone

from fastapi import APIRouter, Request

from guardian_service.config import settings

router = APIRouter(tags=["health"])


@router.get("/")
def root(request: Request):
    store = request.app.state.store
    return {
        "name": "Light Pollution Guardian",
        "status": "running",
        "cities": len(store),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/api/nasa-status")
def nasa_status(request: Request):
    store = request.app.state.store
    active = sum(c.nasa_events_count or 0 for c in store.cities())
    return {
        "data_sources_operational": settings.data_sources,
        "active_events": active,
        "asteroids_today": settings.asteroids_today,
    }
