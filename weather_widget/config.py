from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    app_name: str = "weather-widget"
    log_level: str = "INFO"

    # Providers
    geocoding_base_url: str = "https://nominatim.openstreetmap.org"
    forecast_base_url: str = "https://api.open-meteo.com/v1"
    # Nominatim rejects requests without an identifying agent
    http_user_agent: str = "weather-widget/0.1"
    http_timeout_seconds: float = 10.0

    # Widget behaviour
    suggestion_limit: int = 5
    suggestion_min_chars: int = 3
    hourly_window_hours: int = 24
    default_units: Literal["metric", "imperial"] = "metric"

    # Redis (empty string disables the geocoding cache)
    redis_url: str = ""
    cache_ttl_geocode_seconds: int = 86_400


settings = Settings()
