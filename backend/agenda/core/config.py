"""Application configuration managed via environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Weekly Agenda Backend"
    debug: bool = False
    log_level: str = "INFO"
    database_url: str = "sqlite:///./weekly_agenda.db"
    auto_create_tables: bool = False
    opik_enabled: bool = False
    opik_api_key: str | None = None
    opik_project: str = "weekly-agenda"
    morning_start: str = "09:00"
    morning_end: str = "13:30"
    afternoon_start: str = "15:30"
    afternoon_end: str = "20:00"
    reserve_existing_slots: bool = False


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


settings = get_settings()
