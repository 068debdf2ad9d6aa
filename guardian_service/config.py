from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "SERVICE_", "env_file": ".env", "extra": "ignore"}

    host: str = "127.0.0.1"
    port: int = 5000

    # Reported by /api/nasa-status
    data_sources: list[str] = ["EONET", "VIIRS Black Marble", "NeoWs", "Earth Imagery"]
    asteroids_today: int = 0


settings = Settings()
