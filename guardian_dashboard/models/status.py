from pydantic import BaseModel, ConfigDict, Field


class ServiceStatus(BaseModel):
    """Summary of the upstream NASA feeds as reported by the analysis service."""

    model_config = ConfigDict(frozen=True)

    data_sources_operational: list[str] = Field(default_factory=list)
    active_events: int = 0
    asteroids_today: int = 0
