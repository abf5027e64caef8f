from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    env: str = "development"

    log_level: str = "INFO"
    log_json: bool = True

    # absence is reported per request, never at startup
    stripe_secret_key: Optional[str] = None
    stripe_api_base: str = "https://api.stripe.com/v1"
    stripe_timeout_seconds: Optional[float] = None
    default_currency: str = "myr"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()


def get_settings() -> Settings:
    return settings
