"""Centralized message constants for error messages, log templates, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Discord ID Validation Errors
    INVALID_SNOWFLAKE = "Discord snowflake ID must be positive"
    SNOWFLAKE_TOO_LARGE = "Discord snowflake ID exceeds maximum value (2^64)"

    # Media Validation Errors
    EMPTY_SOURCE_ID = "Source ID cannot be empty"
    INVALID_SOURCE_ID = "Source ID contains invalid characters: {value}"

    # Field Validation Errors (templates)
    FIELD_CANNOT_BE_EMPTY = "{field_name} cannot be empty"

    # Settings Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    EMPTY_PLAYER_EXECUTABLE = "Player executable cannot be empty"

    # Metadata Errors
    METADATA_UNAVAILABLE = "Metadata unavailable for '{source_id}'"
    METADATA_EMPTY_RESPONSE = "yt-dlp returned no info for '{source_id}'"

    # Authentication/Security Errors
    DISCORD_TOKEN_REQUIRED = "DISCORD_TOKEN environment variable is required"
    BOT_NOT_INITIALIZED = "Bot not initialized. Call set_bot() first."
    CONTAINER_NOT_FOUND = "Container not found on bot instance"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters.
    """

    # Queue Operations
    QUEUE_APPENDED = "Added %s to queue at position %d"
    QUEUE_CONSUMED = "Consumed %s from queue (%d remaining)"

    # Metadata Resolution
    METADATA_RESOLVED = "Resolved metadata for %s: %r (%ss)"
    METADATA_FALLBACK = "Metadata lookup failed for %s, using placeholder: %s"
    METADATA_TIMEOUT = "Metadata lookup for %s timed out after %.1fs, using placeholder"
    METADATA_UNEXPECTED_ERROR = "Unexpected error resolving metadata for %s"
    CACHE_HIT = "Metadata cache hit for %s"
    CACHE_EXPIRED_CLEANED = "Cleaned %d expired metadata cache entries"
    YTDLP_EXTRACT_FAILED = "yt-dlp failed to extract info for %s"

    # Playback Controller
    PLAYBACK_TASK_SPAWNED = "Spawned playback task %s"
    PLAYBACK_TASK_SUPERSEDED = "Playback task %s superseded, stopping loop"
    PLAYBACK_TASK_IDLE = "Queue drained, playback task %s going idle"
    PLAYBACK_TASK_CRASHED = "Playback task %s crashed"
    PLAYBACK_ALREADY_ACTIVE = "Playback already active, not starting a second task"
    PLAYBACK_RESTART = "Restarting playback (previous task cancelled: %s)"
    PLAYBACK_REQUEUED_AFTER_IDLE = "Items arrived while going idle, restarting playback"
    PLAYBACK_NOW_PLAYING = "Now playing %s"
    PLAYBACK_FINISHED = "Finished %s with outcome %s"
    PLAYBACK_FAILED = "Playback failed for %s, advancing to next item"
    PLAYBACK_PLAYER_ERROR = "Media player raised while playing %s"
    PLAYBACK_ANNOUNCE_FAILED = "Failed to announce %s: %r"
    PLAYBACK_SHUTDOWN = "Stopping playback controller (%d task(s) pending)"
    PLAYBACK_SHUTDOWN_FAILED = "Failed stopping playback controller: %r"

    # Player Process
    PLAYER_SPAWNED = "Spawned %s (pid %s) for %s"
    PLAYER_SPAWN_FAILED = "Could not spawn %s for %s: %r"
    PLAYER_EXITED = "Player for %s exited with code %s"
    PLAYER_TERMINATING = "Terminating player (pid %s)"
    PLAYER_KILLING = "Player (pid %s) ignored terminate after %.1fs, killing"
    PLAYER_REAPED = "Player (pid %s) reaped with code %s"
    PLAYER_ALREADY_GONE = "Player (pid %s) already exited"

    # Command Surface
    LINKS_FOUND = "Found %d link(s) from %s in channel %s"
    LINK_ENQUEUED = "Enqueued %s requested by %s"
    SKIP_REQUESTED = "Skip requested by %s (%s)"
    SKIP_DENIED = "Skip denied for %s (%s)"
    PRIVATE_MESSAGE_REJECTED = "Rejected private message from %s (%s)"
    NOTIFY_CHANNEL_UNAVAILABLE = "Notification channel %s unavailable"

    # Bot Lifecycle
    BOT_STARTING = "Starting video queue bot ({environment})"
    BOT_STARTING_RUN = "Running bot"
    BOT_STOPPED = "Bot stopped"
    BOT_KEYBOARD_INTERRUPT = "Keyboard interrupt, shutting down"
    BOT_FATAL_ERROR = "Fatal error: %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s (%s), falling back to basic config"
    LOGGING_DEBUG_ENABLED = "Debug logging enabled"
    BOT_SETUP = "Setting up bot"
    BOT_SETUP_COMPLETE = "Bot setup complete"
    BOT_READY = "Logged in as %s (ID: %s)"
    BOT_CONNECTED_GUILDS = "Connected to %d guild(s)"
    BOT_COG_LOADED = "Loaded cog: %s"
    BOT_COG_LOAD_FAILED = "Failed to load cog %s: %s"
    BOT_COGS_LOADED_SUMMARY = "Cogs loaded: %d ok, %d failed"
    BOT_SLASH_COMMAND_ERROR = "Slash command '%s' failed: %r"
    BOT_ERROR_MESSAGE_SEND_FAILED = "Could not deliver error message to user"
    BOT_SYNCED_GUILD = "Synced %d command(s) to guild %s"
    BOT_SYNC_GUILD_FAILED = "Failed to sync commands to guild %s: %r"
    BOT_SYNCED_GLOBAL = "Synced %d global command(s)"
    BOT_SYNC_GLOBAL_FAILED = "Failed to sync global commands: %r"
    BOT_SYNC_ON_STARTUP_FAILED = "Command sync on startup failed: %r"
    BOT_SHUTTING_DOWN = "Shutting down bot"
    BOT_SHUTDOWN_TIMEOUT = "Graceful shutdown timed out after %.1fs"
    BOT_CONTAINER_SHUTDOWN = "Container shut down"
    BOT_CONTAINER_SHUTDOWN_ERROR = "Error shutting down container: %r"
    BOT_SHUTDOWN_COMPLETE = "Shutdown complete"


class DiscordUIMessages:
    """User-facing strings sent to Discord."""

    # Link listener
    LINKS_ADDED = "Added {count} video{plural} to queue!"
    PRIVATE_NOT_AUTHORIZED = (
        "I'm sorry, but you're not authorized to interact with this bot privately."
    )

    # Now playing notifications
    NOW_PLAYING = "Now playing \U0001f3ac {url}\n**{title}** [{duration}] requested by {submitter}"
    PLAYBACK_FAILED = "⚠️ Could not play {url}, moving on."

    # Skip
    SKIP_ACCEPTED = "⏭️ Skipping to the next video."
    SKIP_NOT_ALLOWED = "❌ Only bot maintainers can skip videos."

    # Queue
    QUEUE_HEADER = "The current queue:"
    QUEUE_EMPTY = "The queue is empty."
    QUEUE_NOW_PLAYING_LINE = "> {title} [{duration}] — {submitter}"
    QUEUE_ITEM_LINE = "- {title} [{duration}] — {submitter}"
    QUEUE_MORE = "…and {count} more"
    QUEUE_STATUS = "**Status:** {status}"
    STATUS_PLAYING = "Playing"
    STATUS_NOT_PLAYING = "Not Playing"

    # Errors
    ERROR_OCCURRED = "❌ An error occurred: {error}"
    WRONG_CHANNEL = "❌ This command only works in the queue channel."

    # Help
    HELP_TITLE = "You can use the following commands:"
    HELP_BODY = (
        "Post a YouTube link in the queue channel to add it to the queue.\n"
        "`/queue` — show the current queue\n"
        "`/skip` — skip the current video (maintainers only)\n"
        "`/help` — display this help"
    )
