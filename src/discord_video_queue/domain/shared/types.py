"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across the package is defined here once,
so models can simply annotate their fields::

    from discord_video_queue.domain.shared.types import DiscordSnowflake, NonEmptyStr

    class MyModel(BaseModel):
        user_id: DiscordSnowflake
        name: NonEmptyStr
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── Numeric constraints ─────────────────────────────────────────────

DiscordSnowflake = Annotated[int, Field(gt=0, lt=2**64)]
"""Positive integer that fits a Discord snowflake (1 … 2^64-1)."""

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

PositiveInt = Annotated[int, Field(gt=0)]
"""Integer > 0."""

NonNegativeFloat = Annotated[float, Field(ge=0.0)]
"""Float >= 0.0."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

MediaTitleStr = Annotated[str, Field(min_length=1, max_length=500)]
"""Media title: 1-500 characters."""


# ── Domain-specific numeric constraints ─────────────────────────────

MAX_DURATION_SECONDS: int = 7 * 86_400
"""Upper bound for a media duration; livestream VODs run long."""

DurationSeconds = Annotated[int, Field(ge=0, le=MAX_DURATION_SECONDS)]
"""Media duration in seconds: 0 … MAX_DURATION_SECONDS."""
