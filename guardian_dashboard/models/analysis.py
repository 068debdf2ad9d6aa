import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from guardian_dashboard.constants import RATIO_SUM_TOLERANCE

logger = logging.getLogger(__name__)


class HistoryPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    blue_ratio: float = Field(ge=0.0, le=1.0)
    orange_ratio: float = Field(ge=0.0, le=1.0)


class NasaEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    category: str
    date: str
    source: str


class EarthImagery(BaseModel):
    model_config = ConfigDict(frozen=True)

    image_available: bool = False
    image_url: str | None = None


class NighttimeData(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_night_data: bool = False


class AsteroidsData(BaseModel):
    model_config = ConfigDict(frozen=True)

    asteroids_today: int = 0


class Analysis(BaseModel):
    """Detailed light-pollution report for one city."""

    model_config = ConfigDict(frozen=True)

    city_id: str = Field(min_length=1)
    name: str
    description: str = ""
    region: str | None = None
    population: int | None = None
    status: str
    health_score: int = Field(ge=0, le=100)
    blue_ratio: float = Field(ge=0.0, le=1.0)
    orange_ratio: float = Field(ge=0.0, le=1.0)
    history: list[HistoryPoint] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    data_sources: list[str] = Field(default_factory=list)
    nasa_events: list[NasaEvent] | None = None
    image_url: str = ""
    last_updated: str = ""

    earth_imagery: EarthImagery | None = None
    nighttime_data: NighttimeData | None = None
    asteroids_data: AsteroidsData | None = None

    @model_validator(mode="before")
    @classmethod
    def _accept_id_alias(cls, data):
        # Some service revisions send "id" instead of "city_id"
        if isinstance(data, dict) and not data.get("city_id") and data.get("id"):
            data = {**data, "city_id": data["id"]}
        return data

    @field_validator("data_sources")
    @classmethod
    def _dedupe_sources(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))

    @model_validator(mode="after")
    def _check_ratio_sum(self):
        total = self.blue_ratio + self.orange_ratio
        if abs(total - 1.0) > RATIO_SUM_TOLERANCE:
            logger.warning("Analysis %s: blue+orange ratio = %.3f (expected ~1.0)",
                           self.city_id, total)
        return self
