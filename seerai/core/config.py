# seerai/core/config.py
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "SeerAI Tarot Backend"
APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Provider credentials. No defaults: the service refuses to start without them.
    GEMINI_API_KEY: str
    GOOGLE_PROJECT_ID: str
    GOOGLE_REGION: str = "us-central1"

    LLM_CLIENT: Literal["gemini", "vertex"] = "gemini"
    TAROT_MODEL: str = "gemini-2.0-flash"
    TAROT_TEMPERATURE: float = 0.7
    TAROT_MAX_OUTPUT_TOKENS: int = 2000
    TAROT_JSON_MODE: bool = True

    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    RATE_LIMIT: str = "100/15 minutes"
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


def get_settings() -> Settings:
    return Settings()
