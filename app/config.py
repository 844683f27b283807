# app/config.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables (or a .env file)."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "Usuarios API"
    environment: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Static assets served at the site root
    static_dir: str = "public"

    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
