from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

from ..validators.config_validators import to_lowercase, to_uppercase


class Settings(BaseSettings):
    """
    Process configuration, read from the environment and `src/hrms/.env`.
    """

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Database
    POSTGRES_DRIVER: str = "psycopg"
    POSTGRES_USERNAME: str = "hrms"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "hrms"
    DATABASE_URL_OVERRIDE: str | None = None
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    SQLALCHEMY_ECHO: bool = False

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/hrms")
    LOG_MAX_BYTES: int = 10_000_000
    LOG_BACKUP_COUNT: int = 5
    ENABLE_SQL_LOGGING: bool = False

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def normalize_log_format(cls, v):
        return to_lowercase(v)

    @property
    def DATABASE_URL(self) -> str:
        """
        Async SQLAlchemy URL. `DATABASE_URL_OVERRIDE` is used as given (for
        example `sqlite+aiosqlite:///./hrms.db` on a laptop); otherwise the URL
        is built from the POSTGRES_* parts, with the password escaped.
        """
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE

        url = URL.create(
            drivername=f"postgresql+{self.POSTGRES_DRIVER}",
            username=self.POSTGRES_USERNAME,
            password=self.POSTGRES_PASSWORD or None,
            host=self.POSTGRES_HOST,
            port=self.POSTGRES_PORT,
            database=self.POSTGRES_DB,
        )
        return url.render_as_string(hide_password=False)

    def engine_options(self) -> dict[str, Any]:
        """Keyword arguments for create_async_engine."""
        options: dict[str, Any] = {"echo": self.SQLALCHEMY_ECHO}
        # SQLite engines use a pool without size limits
        if make_url(self.DATABASE_URL).get_backend_name() != "sqlite":
            options["pool_size"] = self.DB_POOL_SIZE
            options["max_overflow"] = self.DB_MAX_OVERFLOW
        return options


@lru_cache()
def get_settings() -> Settings:
    return Settings()
