"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class StorageBackend(str, Enum):
    """Where users, fasts, meals and sessions are kept"""

    SQL = "sql"
    MEMORY = "memory"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="FastLog", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Storage settings
    storage_backend: StorageBackend = Field(
        default=StorageBackend.SQL, description="Storage backend (sql or memory)"
    )
    database_url: str = Field(
        default="postgresql+psycopg2://user@localhost:5432/fastlog",
        description="SQLAlchemy database URL",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Session settings
    session_cookie_name: str = Field(
        default="fastlog_session", description="Name of the session cookie"
    )
    session_ttl_hours: int = Field(
        default=24, ge=1, description="Session lifetime in hours"
    )

    # Password hashing
    password_kdf_rounds: int = Field(
        default=64, ge=1, description="bcrypt KDF rounds used for password hashes"
    )

    # Avatar uploads
    upload_dir: str = Field(default="uploads", description="Avatar upload directory")
    upload_url_prefix: str = Field(
        default="/uploads", description="URL path avatars are served from"
    )
    max_avatar_bytes: int = Field(
        default=5 * 1024 * 1024, ge=1, description="Maximum avatar size in bytes"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="/api", description="API route prefix")
    api_title: str = Field(default="FastLog API", description="API documentation title")
    api_description: str = Field(
        default="Intermittent fasting tracker with meal logging",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("storage_backend", mode="before")
    @classmethod
    def validate_storage_backend(cls, v):
        if isinstance(v, str):
            return StorageBackend(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING

    def uses_memory_storage(self) -> bool:
        return self.storage_backend == StorageBackend.MEMORY


# Global settings instance
settings = Settings()
