"""Configuration management for Nova Users.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LanguageInfo(BaseModel):
    """A language offered by the language changer menu.

    Attributes:
        info: Native name, shown as the link title.
        name: Display name, shown as the link text.
    """

    info: str
    name: str


DEFAULT_LANGUAGES: dict[str, LanguageInfo] = {
    "en": LanguageInfo(info="English", name="English"),
    "fr": LanguageInfo(info="Français", name="French"),
    "de": LanguageInfo(info="Deutsch", name="German"),
    "es": LanguageInfo(info="Español", name="Spanish"),
    "ro": LanguageInfo(info="Română", name="Romanian"),
}


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NOVA_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Nova Users"
    app_version: str = "3.0.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False
    app_locale: str = "en"
    languages: dict[str, LanguageInfo] = Field(default_factory=lambda: dict(DEFAULT_LANGUAGES))

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./storage/nova_users.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_echo: bool = False
    table_prefix: str = Field(
        default="nova_",
        description="Prefix applied to every table name",
    )

    # Session Settings
    session_secret: str = Field(
        default="change-me-in-production-use-openssl-rand-hex-32",
        description="Secret key used to sign the session cookie",
    )
    session_cookie: str = "nova_session"

    # Roles administration
    roles_per_page: int = Field(default=25, ge=1)

    # Assets Settings
    assets_driver: Literal["default", "custom"] = "default"
    assets_dispatcher: str | None = Field(
        default=None,
        description="Dotted path of the dispatcher class used by the 'custom' driver",
    )
    assets_cache_time: int = Field(default=10800, ge=0)

    # Profiler Settings
    profiler_use_forensics: bool = False
    profiler_with_database: bool = False

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("app_locale")
    @classmethod
    def normalize_locale(cls, v: str) -> str:
        """Normalize the locale code to lowercase."""
        return v.strip().lower()

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @model_validator(mode="after")
    def validate_locale_is_offered(self) -> "Settings":
        """Validate that the default locale is one of the offered languages."""
        if self.app_locale not in self.languages:
            raise ValueError(
                f"Default locale '{self.app_locale}' is not one of the configured "
                f"languages: {', '.join(sorted(self.languages))}"
            )
        return self

    @model_validator(mode="after")
    def validate_custom_assets_driver(self) -> "Settings":
        """Validate that the custom assets driver names its dispatcher."""
        if self.assets_driver == "custom" and not self.assets_dispatcher:
            raise ValueError("The 'custom' assets driver requires NOVA_ASSETS_DISPATCHER")
        return self

    @model_validator(mode="after")
    def validate_sqlite_workers(self) -> "Settings":
        """Validate that SQLite is not used with multiple workers."""
        if self.workers > 1 and self.database_url.startswith("sqlite"):
            raise ValueError(
                "SQLite does not support multiple worker processes. "
                f"Requested {self.workers} workers, but SQLite requires workers=1. "
                "Either use --workers 1 or switch to PostgreSQL."
            )
        return self

    def table_name(self, name: str) -> str:
        """Return a table name with the configured prefix applied."""
        return f"{self.table_prefix}{name}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
