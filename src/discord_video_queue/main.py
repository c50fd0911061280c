#!/usr/bin/env python3
"""Main entry point for the Discord video queue bot."""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path
from typing import Any

from discord_video_queue.domain.shared.messages import ErrorMessages, LogTemplates
from discord_video_queue.utils.logging import ColoredFormatter

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Loggers raised when debug mode is on; discord.py stays quieter than our own code.
DEBUG_LOGGER_LEVELS = {
    "discord_video_queue": logging.DEBUG,
    "discord": logging.INFO,
}


def _load_logging_config(config_path: Path) -> dict[str, Any]:
    with open(config_path) as f:
        config = json.load(f)
    if not isinstance(config, dict):
        raise ValueError(f"expected a JSON object, got {type(config).__name__}")
    return config


def _fallback_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter(LOG_FORMAT, LOG_DATEFMT, stream=handler.stream))
    return handler


def setup_logging(
    log_level: str = "INFO",
    config_path: Path = _LOGGING_CONFIG_PATH,
    *,
    debug: bool = False,
) -> None:
    """Configure logging from ``logging_config.json``.

    A missing or broken config file falls back to a single colored console
    handler. ``log_level`` always wins for the root logger. ``debug`` turns on
    DEBUG output for this package and INFO for discord.py.
    """
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        logging.config.dictConfig(_load_logging_config(config_path))
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError.
        logging.basicConfig(level=resolved_level, handlers=[_fallback_handler()])
        logging.warning(LogTemplates.LOGGING_CONFIG_FALLBACK, config_path, exc)

    logging.getLogger().setLevel(resolved_level)

    if debug:
        for name, level in DEBUG_LOGGER_LEVELS.items():
            logging.getLogger(name).setLevel(level)
        logging.getLogger(__name__).debug(LogTemplates.LOGGING_DEBUG_ENABLED)


def main() -> int:
    from discord_video_queue.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level, debug=settings.debug)

    logger = logging.getLogger(__name__)

    token_value = settings.discord.token.get_secret_value()
    if not token_value:
        logger.error(ErrorMessages.DISCORD_TOKEN_REQUIRED)
        return 1

    logger.info(LogTemplates.BOT_STARTING.format(environment=settings.environment))

    from discord_video_queue.config.container import create_container
    from discord_video_queue.infrastructure.discord.bot import create_bot

    container = create_container(settings)
    bot = create_bot(container, settings)

    try:
        logger.info(LogTemplates.BOT_STARTING_RUN)
        bot.run_with_graceful_shutdown(token_value)
        logger.info(LogTemplates.BOT_STOPPED)
        return 0
    except KeyboardInterrupt:
        logger.info(LogTemplates.BOT_KEYBOARD_INTERRUPT)
        return 0
    except Exception as e:
        logger.exception(LogTemplates.BOT_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
