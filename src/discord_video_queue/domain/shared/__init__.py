"""
Shared Domain Kernel

Contains constrained types, messages, and exceptions shared across the domain.
"""

from discord_video_queue.domain.shared.exceptions import (
    DomainError,
    MetadataUnavailableError,
)

__all__ = [
    "DomainError",
    "MetadataUnavailableError",
]
