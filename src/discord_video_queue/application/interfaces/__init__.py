"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters.
"""

from discord_video_queue.application.interfaces.media_player import MediaPlayer
from discord_video_queue.application.interfaces.metadata_resolver import MetadataResolver
from discord_video_queue.application.interfaces.notifier import PlaybackNotifier

__all__ = [
    "MetadataResolver",
    "MediaPlayer",
    "PlaybackNotifier",
]
