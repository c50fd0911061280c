"""
Media Bounded Context

Queued videos, their submitters, and the playback state vocabulary.
"""

from discord_video_queue.domain.media.entities import MediaEntity, MediaMetadata, Submitter
from discord_video_queue.domain.media.value_objects import PlaybackState, PlayOutcome, SourceId

__all__ = [
    # Entities
    "MediaEntity",
    "MediaMetadata",
    "Submitter",
    # Value Objects
    "SourceId",
    "PlaybackState",
    "PlayOutcome",
]
