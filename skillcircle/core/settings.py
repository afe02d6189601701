"""SkillCircle settings, read from the environment or a local .env file."""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Environments where cookies are sent over plain HTTP.
_INSECURE_ENVS = {"dev", "development", "local", "test"}

# Hosting providers hand out bare postgres URLs; the installed driver is psycopg 3.
_POSTGRES_PREFIXES = ("postgres://", "postgresql://")
_PSYCOPG_PREFIX = "postgresql+psycopg://"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    env_name: str = Field(default="development", alias="ENV_NAME")

    # PostgreSQL in deployments, SQLite for tests and local hacking
    database_url: str = Field(alias="DATABASE_URL")

    # SQLAdmin back office
    session_secret_key: str = Field(alias="SESSION_SECRET_KEY")
    admin_username: str = Field(alias="ADMIN_USERNAME")
    admin_password: str = Field(alias="ADMIN_PASSWORD")

    # Comma-separated origins of the web client
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Google sign-in through Firebase Authentication
    session_expires_days: int = Field(
        default=5, alias="SESSION_EXPIRES_DAYS", ge=1, le=14
    )
    firebase_project_id: str | None = Field(default=None, alias="FIREBASE_PROJECT_ID")

    # Upper bound for ?limit= on search and exchange listings
    max_page_size: int = Field(default=100, alias="MAX_PAGE_SIZE", ge=1)

    @field_validator("database_url")
    @classmethod
    def use_psycopg_driver(cls, value: str) -> str:
        for prefix in _POSTGRES_PREFIXES:
            if value.startswith(prefix):
                return _PSYCOPG_PREFIX + value[len(prefix) :]
        return value

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @computed_field
    @property
    def is_secure_cookie(self) -> bool:
        """Session cookies carry Secure everywhere but local/test setups."""
        return self.env_name.lower() not in _INSECURE_ENVS

    @computed_field
    @property
    def session_expires_in(self) -> timedelta:
        return timedelta(days=self.session_expires_days)


@lru_cache
def get_settings() -> Settings:
    return Settings()
