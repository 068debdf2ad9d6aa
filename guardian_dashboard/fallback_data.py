"""Local fallback store: city catalog and analyses bundled with the client.

Used whenever the analysis service cannot be reached or returns an error.
"""

import logging

from guardian_dashboard.models.analysis import Analysis
from guardian_dashboard.models.city import City

logger = logging.getLogger(__name__)

_SOURCES = ["NASA VIIRS Black Marble", "NASA EONET", "NASA NeoWs", "Datos locales"]

FALLBACK_CITIES: list[dict] = [
    {"id": "lima", "name": "Lima Metropolitana", "status": "CRÍTICO", "health_score": 35, "nasa_events_count": 2},
    {"id": "arequipa", "name": "Arequipa", "status": "MODERADO", "health_score": 58, "nasa_events_count": 1},
    {"id": "cusco", "name": "Cusco", "status": "SALUDABLE", "health_score": 78, "nasa_events_count": 0},
    {"id": "trujillo", "name": "Trujillo", "status": "MODERADO", "health_score": 49, "nasa_events_count": 1},
    {"id": "piura", "name": "Piura", "status": "MODERADO", "health_score": 44, "nasa_events_count": 0},
    {"id": "puno", "name": "Puno", "status": "SALUDABLE", "health_score": 82, "nasa_events_count": 0},
]

FALLBACK_ANALYSES: dict[str, dict] = {
    "lima": {
        "city_id": "lima",
        "name": "Lima Metropolitana",
        "description": "Capital costera con alta densidad de alumbrado LED blanco.",
        "region": "Lima",
        "population": 10_004_000,
        "status": "CRÍTICO",
        "health_score": 35,
        "blue_ratio": 0.68,
        "orange_ratio": 0.32,
        "history": [
            {"year": 2020, "blue_ratio": 0.52, "orange_ratio": 0.48},
            {"year": 2021, "blue_ratio": 0.57, "orange_ratio": 0.43},
            {"year": 2022, "blue_ratio": 0.63, "orange_ratio": 0.37},
            {"year": 2023, "blue_ratio": 0.68, "orange_ratio": 0.32},
        ],
        "recommendations": [
            "Reemplazar luminarias LED frías por LED cálido (< 3000K)",
            "Instalar pantallas de apantallamiento en vías principales",
            "Reducir la intensidad del alumbrado después de medianoche",
        ],
        "data_sources": _SOURCES,
        "nasa_events": [
            {"title": "Oleaje anómalo en la costa central", "category": "Severe Storms",
             "date": "2023-11-04", "source": "EONET"},
            {"title": "Bruma costera persistente", "category": "Dust and Haze",
             "date": "2023-10-18", "source": "EONET"},
        ],
        "image_url": "https://images.pexels.com/photos/2929906/pexels-photo-2929906.jpeg",
        "last_updated": "2024-10-05T00:00:00Z",
        "nighttime_data": {"has_night_data": True},
        "asteroids_data": {"asteroids_today": 0},
    },
    "arequipa": {
        "city_id": "arequipa",
        "name": "Arequipa",
        "description": "Ciudad blanca al pie del Misti, transición parcial a LED.",
        "region": "Arequipa",
        "population": 1_080_000,
        "status": "MODERADO",
        "health_score": 58,
        "blue_ratio": 0.45,
        "orange_ratio": 0.55,
        "history": [
            {"year": 2020, "blue_ratio": 0.31, "orange_ratio": 0.69},
            {"year": 2021, "blue_ratio": 0.36, "orange_ratio": 0.64},
            {"year": 2022, "blue_ratio": 0.41, "orange_ratio": 0.59},
            {"year": 2023, "blue_ratio": 0.45, "orange_ratio": 0.55},
        ],
        "recommendations": [
            "Mantener el sodio de alta presión en el centro histórico",
            "Definir una temperatura de color máxima para nuevas instalaciones",
        ],
        "data_sources": _SOURCES,
        "nasa_events": [
            {"title": "Actividad fumarólica del volcán Sabancaya", "category": "Volcanoes",
             "date": "2023-09-21", "source": "EONET"},
        ],
        "image_url": "https://images.pexels.com/photos/5254926/pexels-photo-5254926.jpeg",
        "last_updated": "2024-10-05T00:00:00Z",
        "nighttime_data": {"has_night_data": True},
    },
    "cusco": {
        "city_id": "cusco",
        "name": "Cusco",
        "description": "Centro histórico con alumbrado cálido y cielos andinos oscuros.",
        "region": "Cusco",
        "population": 428_000,
        "status": "SALUDABLE",
        "health_score": 78,
        "blue_ratio": 0.22,
        "orange_ratio": 0.78,
        "history": [
            {"year": 2020, "blue_ratio": 0.18, "orange_ratio": 0.82},
            {"year": 2021, "blue_ratio": 0.19, "orange_ratio": 0.81},
            {"year": 2022, "blue_ratio": 0.21, "orange_ratio": 0.79},
            {"year": 2023, "blue_ratio": 0.22, "orange_ratio": 0.78},
        ],
        "recommendations": [
            "Conservar el alumbrado ámbar del centro histórico",
            "Proteger el cielo nocturno del Valle Sagrado",
        ],
        "data_sources": _SOURCES,
        "nasa_events": [],
        "image_url": "https://images.pexels.com/photos/2929906/pexels-photo-2929906.jpeg",
        "last_updated": "2024-10-05T00:00:00Z",
    },
    "trujillo": {
        "city_id": "trujillo",
        "name": "Trujillo",
        "description": "Ciudad costera del norte con expansión urbana acelerada.",
        "region": "La Libertad",
        "population": 919_000,
        "status": "MODERADO",
        "health_score": 49,
        "blue_ratio": 0.53,
        "orange_ratio": 0.47,
        "history": [
            {"year": 2020, "blue_ratio": 0.40, "orange_ratio": 0.60},
            {"year": 2021, "blue_ratio": 0.45, "orange_ratio": 0.55},
            {"year": 2022, "blue_ratio": 0.49, "orange_ratio": 0.51},
            {"year": 2023, "blue_ratio": 0.53, "orange_ratio": 0.47},
        ],
        "recommendations": [
            "Limitar el alumbrado publicitario nocturno",
            "Priorizar luminarias cálidas en zonas residenciales",
        ],
        "data_sources": _SOURCES,
        "image_url": "https://images.pexels.com/photos/3254729/pexels-photo-3254729.jpeg",
        "last_updated": "2024-10-05T00:00:00Z",
    },
    "piura": {
        "city_id": "piura",
        "name": "Piura",
        "description": "Ciudad del desierto norteño con alumbrado mixto.",
        "region": "Piura",
        "population": 484_000,
        "status": "MODERADO",
        "health_score": 44,
        "blue_ratio": 0.56,
        "orange_ratio": 0.44,
        "history": [
            {"year": 2020, "blue_ratio": 0.46, "orange_ratio": 0.54},
            {"year": 2021, "blue_ratio": 0.50, "orange_ratio": 0.50},
            {"year": 2022, "blue_ratio": 0.53, "orange_ratio": 0.47},
            {"year": 2023, "blue_ratio": 0.56, "orange_ratio": 0.44},
        ],
        "recommendations": [
            "Auditar las luminarias instaladas desde 2020",
        ],
        "data_sources": _SOURCES,
        "image_url": "https://images.pexels.com/photos/2356045/pexels-photo-2356045.jpeg",
        "last_updated": "2024-10-05T00:00:00Z",
    },
    "puno": {
        "city_id": "puno",
        "name": "Puno",
        "description": "Ciudad altiplánica a orillas del lago Titicaca.",
        "region": "Puno",
        "population": 141_000,
        "status": "SALUDABLE",
        "health_score": 82,
        "blue_ratio": 0.17,
        "orange_ratio": 0.83,
        "history": [
            {"year": 2020, "blue_ratio": 0.15, "orange_ratio": 0.85},
            {"year": 2021, "blue_ratio": 0.15, "orange_ratio": 0.85},
            {"year": 2022, "blue_ratio": 0.16, "orange_ratio": 0.84},
            {"year": 2023, "blue_ratio": 0.17, "orange_ratio": 0.83},
        ],
        "recommendations": [
            "Declarar el lago Titicaca reserva de cielo oscuro",
        ],
        "data_sources": _SOURCES,
        "image_url": "https://images.pexels.com/photos/2356045/pexels-photo-2356045.jpeg",
        "last_updated": "2024-10-05T00:00:00Z",
    },
}


class FallbackStore:
    """In-memory catalog of cities and per-city analyses."""

    def __init__(self, cities: list[dict] | None = None, analyses: dict[str, dict] | None = None):
        raw_cities = FALLBACK_CITIES if cities is None else cities
        raw_analyses = FALLBACK_ANALYSES if analyses is None else analyses
        self._cities = [City.model_validate(c) for c in raw_cities]
        self._analyses = {
            city_id: Analysis.model_validate(a) for city_id, a in raw_analyses.items()
        }

    def cities(self) -> list[City]:
        return list(self._cities)

    def analysis(self, city_id: str) -> Analysis | None:
        return self._analyses.get(city_id)

    def analysis_ids(self) -> list[str]:
        return list(self._analyses)

    def has_analysis(self, city_id: str) -> bool:
        return city_id in self._analyses

    def __len__(self) -> int:
        return len(self._cities)


_default_store: FallbackStore | None = None


def get_fallback_store() -> FallbackStore:
    """Shared store built from the bundled dataset."""
    global _default_store
    if _default_store is None:
        _default_store = FallbackStore()
        logger.debug("Fallback store loaded: %d cities, %d analyses",
                     len(_default_store), len(_default_store.analysis_ids()))
    return _default_store
