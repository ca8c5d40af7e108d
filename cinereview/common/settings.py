# cinereview/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from cinereview.common.strings.splitters import csv_to_list


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(
        default_factory=lambda: ["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"]
    )
    cors_allow_credentials: bool = True

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "cinereview"
    user: str = "cineuser"
    password: str = "cinepass"
    schema_name: str = Field(default="cinereview", alias="DB_SCHEMA")
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    # Optional single URL (if set, it takes precedence)
    url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class AuthConfig(BaseModel):
    jwt_secret: str = "dev-only-secret"
    jwt_algorithms: List[str] = Field(default_factory=lambda: ["HS256"])
    jwt_audience: Optional[str] = None
    jwt_issuer: Optional[str] = None
    user_id_claim: str = "sub"

    @field_validator("jwt_algorithms", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class TMDBConfig(BaseModel):
    base_url: str = "https://api.themoviedb.org/3"
    api_key: str = ""
    timeout_sec: float = 10.0
    retries: int = 2  # connection-level retries only


class PagingConfig(BaseModel):
    default_limit: int = Field(10, ge=1)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "cinereview"
    app_env: str = "development"  # development|test|staging|production
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    auth: AuthConfig = AuthConfig()
    tmdb: TMDBConfig = TMDBConfig()
    paging: PagingConfig = PagingConfig()

    # -------- Alembic / migrations --------
    alembic_script_location: str = "cinereview/database/alembic"
    alembic_version_table_schema: str = "public"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.db.effective_url

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> str:
        return self.db.schema_name

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from cinereview.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
