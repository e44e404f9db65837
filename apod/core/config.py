from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.nasa.gov/planetary/apod"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="APOD_", env_file=".env", extra="ignore")

    # APOD service
    api_key: str = "DEMO_KEY"
    base_url: str = DEFAULT_BASE_URL

    # HTTP transport
    http_timeout: float = 10.0
    http_verify_ssl: bool = True  # set False behind corporate SSL-inspection proxies

    # Logging
    log_level: str = "INFO"


settings = Settings()
