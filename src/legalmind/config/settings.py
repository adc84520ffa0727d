"""
Application settings using Pydantic.

This module provides runtime configuration with environment variable support.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from legalmind.config.constants import (
    DEFAULT_LOG_LEVEL,
    MAX_CHAT_SESSIONS,
    MAX_MESSAGE_LENGTH,
    RATE_LIMIT_MAX_KEYS,
    RATE_LIMIT_MAX_REQUESTS,
    RATE_LIMIT_WINDOW_SECONDS,
    THINKING_DELAY_MAX,
    THINKING_DELAY_MIN,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Settings can be overridden via environment variables prefixed with LEGALMIND_
    For example: LEGALMIND_THINKING_DELAY_MAX=1.0
    """

    model_config = SettingsConfigDict(
        env_prefix="LEGALMIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow other env vars without error
    )

    # Conversation
    thinking_delay_min: float = Field(
        default=THINKING_DELAY_MIN,
        description="Minimum simulated thinking delay in seconds",
        ge=0.0,
        le=60.0,
    )

    thinking_delay_max: float = Field(
        default=THINKING_DELAY_MAX,
        description="Maximum simulated thinking delay in seconds",
        ge=0.0,
        le=60.0,
    )

    max_message_length: int = Field(
        default=MAX_MESSAGE_LENGTH,
        description="Maximum chat message length accepted by the API",
        ge=1,
        le=100000,
    )

    # Rate limiting
    rate_limit_max_requests: int = Field(
        default=RATE_LIMIT_MAX_REQUESTS,
        description="Requests allowed per user within one window",
        ge=1,
    )

    rate_limit_window_seconds: float = Field(
        default=RATE_LIMIT_WINDOW_SECONDS,
        description="Rate limit window length in seconds",
        gt=0.0,
    )

    rate_limit_max_keys: int = Field(
        default=RATE_LIMIT_MAX_KEYS,
        description="Tracked users before LRU eviction",
        ge=1,
    )

    # Web
    max_sessions: int = Field(
        default=MAX_CHAT_SESSIONS,
        description="Chat sessions kept before LRU eviction",
        ge=1,
    )

    # Runtime
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Root log level (DEBUG, INFO, WARNING, ...)",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @model_validator(mode="after")
    def _check_delay_window(self) -> "Settings":
        if self.thinking_delay_min > self.thinking_delay_max:
            raise ValueError("thinking_delay_min must not exceed thinking_delay_max")
        return self

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


# Global settings instance (can be overridden for testing)
settings = Settings()
