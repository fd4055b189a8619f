"""Logging configuration for the portprobe package."""

from __future__ import annotations

import logging
import sys

from .config import get_settings

LOGGER_NAME = "portprobe"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(
    log_file: str | None = None,
    log_level: str | None = None,
    force: bool = False,
) -> None:
    """Configure the 'portprobe' logger with console and optional file handlers.

    Library code only emits records; applications (such as the CLI) call this
    once at startup.

    Args:
        log_file: Path to log file. Defaults to PORTPROBE_LOG_FILE, if set.
        log_level: Log level name. Defaults to PORTPROBE_LOG_LEVEL or WARNING.
        force: If True, reconfigure even if already configured.
    """
    global _configured

    if _configured and not force:
        return

    if log_file is None or log_level is None:
        settings = get_settings()
        if log_file is None:
            log_file = settings.log_file
        if log_level is None:
            log_level = settings.log_level

    logger = logging.getLogger(LOGGER_NAME)
    level = getattr(logging, log_level.upper(), logging.WARNING)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            print(f"Warning: Could not create log file {log_file}: {e}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.propagate = False

    _configured = True


__all__ = ["LOGGER_NAME", "configure_logging"]
