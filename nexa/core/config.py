# nexa/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./tickets.db")
    APP_NAME: str = "API Nexa"
    APP_DESC: str = "Gerencie tickets, prioridades e status de forma eficiente."
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = ""

    # CORS origins, comma separated; unset allows all
    CORS_ORIGINS: str | None = None

    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    TICKET_DEFAULT_STATUS: str = "Recebido"

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
