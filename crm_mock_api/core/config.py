from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------
    # App core settings
    # -------------------------
    APP_NAME: str = "CRM Mock API"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # -------------------------
    # HTTP server
    # -------------------------
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ORIGINS: List[str] = ["*"]

    # -------------------------
    # Pydantic v2 config
    # -------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid"
    )


# Singleton
settings = Settings()
