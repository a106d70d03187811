"""Application settings and configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Any, ClassVar, Dict, Optional, List


class Settings(BaseSettings):
    """Application settings with environment variable loading."""

    # API settings
    PROJECT_NAME: str = "AlumniConnect Mentorship"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_V1_STR: str = "/api/v1"

    # CORS
    CORS_ORIGINS: str = "*"
    CORS_HEADERS: str = "*"
    CORS_METHODS: str = "*"

    # Database
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "alumni_connect"
    POSTGRES_PORT: str = "5432"
    DATABASE_URI: Optional[str] = Field(default=None, validate_default=True)
    SQL_ECHO: bool = False

    # Database connection pool settings
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30

    # Redis (optional)
    REDIS_HOST: Optional[str] = None
    REDIS_PORT: Optional[int] = None
    REDIS_PASSWORD: Optional[str] = None
    REDIS_DB: int = 0
    REDIS_TTL: int = 3600

    # Admin oversight listing cache
    PROGRAM_LIST_CACHE_KEY: str = "mentorship:admin_programs"
    PROGRAM_LIST_CACHE_TTL: int = 60

    # Logging
    LOG_DIRECTORY: str = "logs"
    LOG_MAX_BYTES: int = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT: int = 5
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    SERVICE_NAME: str = "alumni-connect-mentorship"

    # Configure bleach for program description sanitization
    ALLOWED_TAGS: ClassVar[list[str]] = [
        "a", "b", "blockquote", "br", "code", "em", "i", "li", "ol",
        "p", "pre", "span", "strong", "u", "ul",
    ]

    ALLOWED_ATTRIBUTES: ClassVar[dict[str, list[str]]] = {
        "a": ["href", "title", "target", "rel"],
        "span": ["class", "style"],
        "p": ["class", "style"],
        "li": ["class"],
        "ol": ["type"],
        "ul": ["type"],
    }

    ALLOWED_CSS_PROPERTIES: ClassVar[list[str]] = [
        "text-align", "text-decoration", "color", "font-weight", "font-style",
    ]

    # Allowed protocols for links
    ALLOWED_PROTOCOLS: ClassVar[list[str]] = ["http", "https", "mailto"]

    @field_validator("DATABASE_URI", mode="before")
    def assemble_db_connection(cls, v: Optional[str], info: Any) -> Any:
        """Build PostgreSQL (asyncpg) connection string from components."""
        if isinstance(v, str) and v:
            return v

        values: Dict[str, Any] = info.data
        user = values.get("POSTGRES_USER", "")
        password = values.get("POSTGRES_PASSWORD", "")
        host = values.get("POSTGRES_SERVER", "")
        port = values.get("POSTGRES_PORT", "5432")
        db = values.get("POSTGRES_DB", "")

        auth = f"{user}:{password}" if password else user
        return f"postgresql+asyncpg://{auth}@{host}:{port}/{db}"

    @field_validator("API_V1_STR")
    def ensure_api_prefix_has_slash(cls, v: str) -> str:
        """Ensure API prefix starts with a slash."""
        if not v.startswith("/"):
            return f"/{v}"
        return v

    @staticmethod
    def _split_list(value: str) -> List[str]:
        if value == "*":
            return ["*"]
        return [item.strip() for item in value.split(",") if item.strip()]

    @property
    def CORS_ORIGINS_LIST(self) -> List[str]:
        return self._split_list(self.CORS_ORIGINS)

    @property
    def CORS_METHODS_LIST(self) -> List[str]:
        return self._split_list(self.CORS_METHODS)

    @property
    def CORS_HEADERS_LIST(self) -> List[str]:
        return self._split_list(self.CORS_HEADERS)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create global settings instance
settings = Settings()
