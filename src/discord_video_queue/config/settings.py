"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.validators import validate_discord_snowflake, validate_non_empty_string


class DiscordSettings(BaseModel):
    """Discord bot configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token: SecretStr = Field(
        default=SecretStr(""), validation_alias=AliasChoices("token", "bot_token", "discord_token")
    )
    command_prefix: str = Field(
        default="!",
        min_length=1,
        max_length=5,
        validation_alias=AliasChoices("command_prefix", "prefix"),
    )
    owner_ids: tuple[int, ...] = Field(
        default_factory=tuple,
        validation_alias=AliasChoices("owner_ids", "owners", "maintainer_ids"),
    )
    channel_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("channel_id", "queue_channel_id", "authorized_channel_id"),
    )
    test_guild_ids: tuple[int, ...] = Field(
        default_factory=tuple, validation_alias=AliasChoices("test_guild_ids", "test_guilds")
    )
    sync_on_startup: bool = False

    @field_validator("owner_ids", "test_guild_ids", mode="before")
    @classmethod
    def validate_snowflake_ids(cls, v: tuple[int, ...] | list[int]) -> tuple[int, ...]:
        """Validate Discord snowflake IDs and convert lists to tuples."""
        # Convert list to tuple if needed (from JSON array in env vars)
        if isinstance(v, list):
            v = tuple(v)
        for snowflake in v:
            validate_discord_snowflake(snowflake)
        return v

    @field_validator("channel_id")
    @classmethod
    def validate_channel_id(cls, v: int | None) -> int | None:
        if v is None:
            return v
        return validate_discord_snowflake(v)


class PlayerSettings(BaseModel):
    """External media player configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    executable: str = Field(
        default="mpv", validation_alias=AliasChoices("executable", "player", "command")
    )
    extra_args: tuple[str, ...] = Field(
        default_factory=tuple, validation_alias=AliasChoices("extra_args", "args")
    )
    terminate_timeout_seconds: float = Field(
        default=5.0,
        ge=0.1,
        le=60.0,
        validation_alias=AliasChoices("terminate_timeout_seconds", "terminate_timeout"),
    )

    @field_validator("executable")
    @classmethod
    def validate_executable(cls, v: str) -> str:
        if not v.strip():
            raise ValueError(ErrorMessages.EMPTY_PLAYER_EXECUTABLE)
        return v.strip()

    @field_validator("extra_args", mode="before")
    @classmethod
    def validate_extra_args(cls, v: tuple[str, ...] | list[str]) -> tuple[str, ...]:
        if isinstance(v, list):
            v = tuple(v)
        for arg in v:
            validate_non_empty_string(arg, "extra_args entry")
        return v


class MetadataSettings(BaseModel):
    """Video metadata lookup configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timeout_seconds: float = Field(
        default=15.0,
        gt=0.0,
        le=120.0,
        validation_alias=AliasChoices("timeout_seconds", "timeout"),
    )
    socket_timeout: int = Field(default=10, ge=1, le=60)
    cache_ttl_seconds: int = Field(
        default=3600, ge=0, validation_alias=AliasChoices("cache_ttl_seconds", "cache_ttl")
    )
    cache_max_size: int = Field(default=500, ge=1, le=10_000)


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - DISCORD__TOKEN, DISCORD__CHANNEL_ID, DISCORD__OWNER_IDS='[1, 2]' (nested with prefix)
    - PLAYER__EXECUTABLE, PLAYER__EXTRA_ARGS='["--fs"]'
    - METADATA__TIMEOUT_SECONDS, METADATA__CACHE_TTL_SECONDS
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    discord: DiscordSettings = Field(default_factory=DiscordSettings)
    player: PlayerSettings = Field(default_factory=PlayerSettings)
    metadata: MetadataSettings = Field(default_factory=MetadataSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
