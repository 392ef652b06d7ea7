from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Remote league API
    league_api_base_url: str = "http://localhost:3001/api/v1"
    league_api_timeout_seconds: float = 30.0

    # Flag images keyed by team name
    flag_base_url: str = "https://flagsapi.codeaid.io"

    # CORS
    allowed_origins: str = "*"  # Comma-separated origins

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
