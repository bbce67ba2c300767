"""Configuration management for the stock API."""

from typing import Any

from dotenv import load_dotenv
from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .enums import Environment, LogFormat, LogLevel
from .logging import LoggingConfig

load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Configuration
    APP_NAME: str = Field(default="Stock Management API")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: Environment = Field(default=Environment.DEVELOPMENT)

    # Server Configuration
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8080, ge=1, le=65535)

    # Store context / authentication
    AUTH_ENABLED: bool | None = Field(default=None)  # None: enabled only in production
    API_KEYS: dict[str, SecretStr] = Field(default_factory=dict)  # api key -> "store_id:user_id"
    DEFAULT_STORE_ID: str = Field(default="store-1")
    DEFAULT_USER_ID: str = Field(default="user-1")

    # Stock Configuration
    DEFAULT_PAGE_LIMIT: int = Field(default=100, ge=1, le=1000)
    CSV_EXPORT_MAX_ROWS: int = Field(default=50000, ge=1)

    # Logging Configuration
    LOG_LEVEL: LogLevel = Field(default=LogLevel.INFO)
    LOG_FORMAT: LogFormat = Field(default=LogFormat.JSON)
    LOG_CONSOLE_ENABLED: bool = Field(default=True)
    LOG_FILE_ENABLED: bool = Field(default=False)
    LOG_FILE_PATH: str = Field(default="logs/app.log")
    LOG_MAX_FILE_SIZE: int = Field(default=10 * 1024 * 1024)  # 10MB
    LOG_BACKUP_COUNT: int = Field(default=5)
    LOG_CORRELATION_ID_ENABLED: bool = Field(default=True)

    @computed_field
    @property
    def logging_config(self: Any) -> LoggingConfig:
        """Generate logging configuration from individual settings."""
        return LoggingConfig(
            level=self.LOG_LEVEL,
            format=self.LOG_FORMAT,
            console_enabled=self.LOG_CONSOLE_ENABLED,
            file_enabled=self.LOG_FILE_ENABLED,
            file_path=self.LOG_FILE_PATH,
            max_file_size=self.LOG_MAX_FILE_SIZE,
            backup_count=self.LOG_BACKUP_COUNT,
            correlation_id_enabled=self.LOG_CORRELATION_ID_ENABLED,
        )

    @property
    def is_development(self: Any) -> bool:
        """Check if running in development mode."""
        return self.DEBUG or self.ENVIRONMENT == Environment.DEVELOPMENT

    @property
    def is_production(self: Any) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT == Environment.PRODUCTION

    @property
    def auth_enabled(self: Any) -> bool:
        """Whether API key authentication is enforced."""
        if self.AUTH_ENABLED is None:
            return self.is_production
        return self.AUTH_ENABLED

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls: Any, v: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("API_KEYS")
    @classmethod
    def validate_api_keys(cls: Any, v: dict[str, SecretStr]) -> dict[str, SecretStr]:
        """Every API key must map to a "store_id:user_id" pair."""
        for value in v.values():
            store_id, sep, user_id = value.get_secret_value().partition(":")
            if not sep or not store_id or not user_id:
                raise ValueError("API_KEYS values must have the form 'store_id:user_id'")
        return v

    def resolve_api_key(self: Any, api_key: str) -> tuple[str, str] | None:
        """Look up the (store_id, user_id) pair for an API key."""
        value = self.API_KEYS.get(api_key)
        if value is None:
            return None
        store_id, _, user_id = value.get_secret_value().partition(":")
        return store_id, user_id

    def model_dump_safe(self: Any) -> dict[str, Any]:
        """Dump settings without exposing secrets."""
        data = self.model_dump()

        # Mask sensitive data
        if data.get("API_KEYS"):
            data["API_KEYS"] = {f"key_{index}": "***masked***" for index in range(len(data["API_KEYS"]))}

        return data
