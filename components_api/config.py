# components_api/config.py
from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # Which repository strategy to build at startup: raw SQL or ORM
    DATA_ACCESS: Literal["sql", "orm"] = "sql"

    # A full SQLAlchemy URL wins over the individual DB_* parts
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_DATABASE: str = "components"
    DB_POOL_SIZE: int = Field(5, ge=1)
    DB_ECHO: bool = False
    CREATE_SCHEMA: bool = False

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:3000"
    STATIC_DIR: str = "public"

    # Example .env:
    # DATA_ACCESS=orm
    # DB_HOST=localhost
    # DB_PASSWORD=secret

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("DATA_ACCESS", mode="before")
    @classmethod
    def _normalize_data_access(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_DATABASE,
        )
        return url.render_as_string(hide_password=False)

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
