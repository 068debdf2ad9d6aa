from fastapi import APIRouter, HTTPException, Request

router = APIRouter(prefix="/api", tags=["cities"])


@router.get("/cities")
def list_cities(request: Request):
    store = request.app.state.store
    return [c.model_dump() for c in store.cities()]


@router.get("/analyze/{city_id}")
def analyze_city(city_id: str, request: Request):
    store = request.app.state.store
    analysis = store.analysis(city_id)
    if analysis is None:
        raise HTTPException(404, f"City '{city_id}' not found")
    return analysis.model_dump(exclude_none=True)
