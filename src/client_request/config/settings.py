"""Configuration management using pydantic-settings.

Supports environment variables (prefixed ``CLIENT_REQUEST_``) and .env file loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration.

    Only ambient behaviour lives here; per-request options travel in the
    header map passed to each call.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLIENT_REQUEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # Transport
    timeout_header: str = Field(
        default="Request-Timeout",
        description="Header whose integer value arms the per-request timeout (seconds)",
    )
    verify_tls: bool = Field(default=True, description="Verify server TLS certificates")
    follow_redirects: bool = Field(
        default=False,
        description="Follow 3xx responses instead of returning them",
    )
    user_agent: str | None = Field(
        default=None,
        description="User-Agent sent when the caller does not set one (None: httpx default)",
    )


settings = Settings()
