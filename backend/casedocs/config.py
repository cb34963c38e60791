"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match current behavior

Collaborators:
  - main.py: reads settings for CORS and startup logging
  - container.py: reads settings for the page chunk repository seed
  - routes.py: reads settings for the align default and search limits
  - logger.py: reads log level and format

Constraints:
  - No business logic, pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ALIGN_MODES = {"on", "off"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/production)
        log_level: Root log level for the service logger (default: INFO)
        log_json: Emit JSON log lines (default: True)
        allowed_origins: Comma-separated CORS origins
        default_align: Highlight alignment when the request omits it (on|off)
        page_chunks_seed_path: JSON file used to seed the in-memory chunk index
        default_search_per_page: Search results per page (default: 10)
        max_search_per_page: Upper bound for per_page (default: 50)
        max_search_query_chars: Maximum search query length (default: 200)
    """

    # Environment
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS configuration
    allowed_origins: str = "http://localhost:3000"

    # Page viewer
    default_align: str = "on"
    page_chunks_seed_path: str = ""

    # Search limits
    default_search_per_page: int = 10
    max_search_per_page: int = 50
    max_search_query_chars: int = 200

    @field_validator("default_align")
    @classmethod
    def default_align_valid(cls, v: str) -> str:
        mode = (v or "on").strip().lower()
        if mode not in _ALIGN_MODES:
            raise ValueError("default_align must be on or off")
        return mode

    @field_validator("max_search_per_page")
    @classmethod
    def max_search_per_page_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_search_per_page must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_upper(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    def validate_search_params(self) -> None:
        """
        Cross-field validation: default page size must fit the maximum.
        Called explicitly after instantiation.
        """
        if not 1 <= self.default_search_per_page <= self.max_search_per_page:
            raise ValueError(
                f"default_search_per_page ({self.default_search_per_page}) must be "
                f"between 1 and max_search_per_page ({self.max_search_per_page})"
            )

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
        ValueError: If cross-field validation fails
    """
    settings = Settings()
    settings.validate_search_params()
    return settings
