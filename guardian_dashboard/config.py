from pathlib import Path

from pydantic_settings import BaseSettings

from guardian_dashboard.constants import API_BASE, DEFAULT_CITY


class Settings(BaseSettings):
    model_config = {"env_prefix": "GUARDIAN_", "env_file": ".env", "extra": "ignore"}

    # Remote analysis service
    api_base: str = API_BASE
    probe_timeout: float = 3.0
    request_timeout: float = 15.0
    reprobe_before_fetch: bool = False

    # Selection
    default_city: str = DEFAULT_CITY

    # Logging
    log_dir: str = str(Path.home() / ".light-guardian" / "logs")
    log_level: str = "INFO"


settings = Settings()
