"""
Domain Layer

Contains pure business logic:
- shared/: Cross-cutting types, messages and exceptions
- media/: Queued videos, submitters and playback vocabulary
"""

from discord_video_queue.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
