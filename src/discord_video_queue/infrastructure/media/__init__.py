"""Media infrastructure - yt-dlp metadata lookup and the external player supervisor."""

from discord_video_queue.infrastructure.media.mpv_player import MpvPlayer
from discord_video_queue.infrastructure.media.ytdlp_resolver import YtDlpMetadataResolver

__all__ = [
    "MpvPlayer",
    "YtDlpMetadataResolver",
]
