from pydantic import BaseModel, ConfigDict, Field


class City(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    status: str
    health_score: int = Field(ge=0, le=100)
    nasa_events_count: int | None = Field(default=None, ge=0)
