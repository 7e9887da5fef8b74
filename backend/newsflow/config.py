from functools import lru_cache
import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


class Settings(BaseSettings):
    # Prefer backend-specific env file to avoid collisions with a root .env
    model_config = SettingsConfigDict(
        env_file=("backend/.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = "development"
    app_name: str = "newsflow"
    app_secret_key: str = "replace-with-a-long-random-secret"

    session_cookie_name: str = "newsflow_session"
    session_max_age_seconds: int = 28800

    # Unset means: derive from LC_ALL / LC_MESSAGES / LANG at startup
    app_language: str | None = None

    openai_api_key: str | None = Field(default=None, validation_alias=AliasChoices("OPENAI_API_KEY", "API_KEY"))
    openai_model: str = "gpt-4o-mini"

    log_level: str = "INFO"
    log_file: str | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    for env_path in (Path("backend/.env"), Path(".env")):
        if env_path.exists():
            load_dotenv(env_path, override=False)
    return Settings()


def configure_logging(settings: Settings) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
