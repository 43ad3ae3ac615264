from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import AnyUrl, BeforeValidator, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",")]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "Crane Queue"
    API_V1_STR: str = "/api"
    FRONTEND_HOST: str = "http://localhost:5173"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    BACKEND_CORS_ORIGINS: Annotated[
        list[AnyUrl] | str, BeforeValidator(parse_cors)
    ] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS] + [
            self.FRONTEND_HOST
        ]

    # Database
    DATABASE_URL: str = "sqlite:///./crane_queue.db"
    SQL_ECHO: bool = False
    # Seconds a SQLite writer waits for the database lock
    SQLITE_BUSY_TIMEOUT: float = 15.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        # Plain postgres URLs are routed through the psycopg driver
        if self.DATABASE_URL.startswith("postgresql://"):
            return self.DATABASE_URL.replace("postgresql://", "postgresql+psycopg://", 1)
        elif self.DATABASE_URL.startswith("postgres://"):
            return self.DATABASE_URL.replace("postgres://", "postgresql+psycopg://", 1)
        return self.DATABASE_URL

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_sqlite(self) -> bool:
        return self.SQLALCHEMY_DATABASE_URI.startswith("sqlite")

    # Queue engine
    # Status given to a queue item admitted from an approved booking.
    # "working" auto-starts the item at approval time.
    BOOKING_ADMISSION_STATUS: Literal["pending", "working"] = "pending"
    BOOKING_LIST_LIMIT: int = 200
    HISTORY_LIST_LIMIT: int = 500
    WORK_LOG_LIST_LIMIT: int = 500
    # JSON catalog served by /work-types; defaults to the bundled one
    WORK_TYPES_FILE: Path | None = None

    # Observability
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"
    LOG_SQL: bool = False

    @model_validator(mode="after")
    def _check_list_limits(self) -> Self:
        if min(
            self.BOOKING_LIST_LIMIT, self.HISTORY_LIST_LIMIT, self.WORK_LOG_LIST_LIMIT
        ) < 1:
            raise ValueError("List limits must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
