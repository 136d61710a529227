"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseModel):
    """Shared-secret authentication configuration."""

    # Value every /api/* request must send in the x-api-key header
    # When unset, all API requests are rejected
    api_key: str | None = None


class ContentfulSettings(BaseModel):
    """Contentful Content Delivery API configuration."""

    space_id: str | None = None
    access_token: str | None = None
    environment: str = "master"

    # Content type ID of blog posts in the Contentful space
    content_type: str = "blogPost"

    base_url: str = "https://cdn.contentful.com"

    # Entries fetched per request when paging through all posts (Contentful max is 1000)
    page_size: int = 100

    # Seconds before an outbound Contentful request is abandoned
    timeout: float = 10.0


class APISettings(BaseModel):
    """API configuration."""

    # Origins allowed to call the API from a browser
    cors_origins: list[str] = [
        "http://localhost:3000",
    ]

    # When True: a missing comment on update returns 404
    # When False: it collapses into the generic 500 failure response
    strict_not_found: bool = False


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested sections:

    Development (default):
        HOST=localhost
        PORT=8000
        AUTH__API_KEY=dev-key
        CONTENTFUL__SPACE_ID=...
        CONTENTFUL__ACCESS_TOKEN=...

    Production:
        ENVIRONMENT=production
        HOST=0.0.0.0
        API__CORS_ORIGINS='["https://blog.example.com"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows CONTENTFUL__SPACE_ID syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000

    # Nested settings
    auth: AuthSettings = AuthSettings()
    contentful: ContentfulSettings = ContentfulSettings()
    api: APISettings = APISettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_git_sha(self) -> "Settings":
        """Load the git SHA from the version file if it exists."""
        self.git_sha = self._load_git_sha(self.git_sha)
        return self

    @staticmethod
    def _load_git_sha(default: str) -> str:
        """Load git SHA from version file.

        Args:
            default: Value to keep when no version file is present

        Returns:
            Git SHA if version file exists, otherwise the default
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return default
        # In development, version file may not exist
        return default
