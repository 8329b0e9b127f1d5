"""Secure logging utilities to keep employee PII out of logs."""

import logging
import re
from typing import Any

from onboarding_core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s {app_name} [%(name)s] %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings.

    Args:
        settings: Settings to use, defaults to the cached settings
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT.format(app_name=settings.app_name.replace("%", "%%")),
        force=True,
    )
    logging.getLogger("onboarding_core").setLevel("DEBUG" if settings.debug else settings.log_level)


def is_debug_mode() -> bool:
    """Check if running in debug mode."""
    return get_settings().debug


def sanitize_exception_message(error: Exception) -> str:
    """Sanitize exception message for logging in production.

    Removes potentially sensitive information like:
    - File system paths
    - URLs and blob keys
    - Email addresses
    - Long tokens

    Args:
        error: The exception to sanitize

    Returns:
        Sanitized error message suitable for production logs
    """
    error_msg = str(error)

    # Remove URLs before paths, the path pattern would split them
    error_msg = re.sub(r"(s3|http|https)://[^\s]+", "[URL]", error_msg)

    # Remove file paths (Unix and Windows)
    error_msg = re.sub(r"['\"]?(/[a-zA-Z0-9_./\-]+|[A-Z]:\\[^\s'\"]+)['\"]?", "[PATH]", error_msg)

    # Remove email addresses
    error_msg = re.sub(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+", "[EMAIL]", error_msg)

    # Remove potential tokens (long alphanumeric strings)
    error_msg = re.sub(r"[a-zA-Z0-9_\-]{32,}", "[TOKEN]", error_msg)

    # Truncate very long messages
    if len(error_msg) > 200:
        error_msg = error_msg[:197] + "..."

    return error_msg


def log_warning(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
    **kwargs: Any,
) -> None:
    """Log a warning with full detail in debug mode, sanitized otherwise.

    Args:
        logger: The logger instance to use
        message: The log message (should be generic, no sensitive data)
        error: Optional exception to include
        **kwargs: Additional context, only attached in debug mode
    """
    if is_debug_mode():
        if error:
            logger.warning(f"{message}: {error}", extra=kwargs)
        else:
            logger.warning(message, extra=kwargs)
    else:
        if error:
            logger.warning(f"{message}: {sanitize_exception_message(error)}")
        else:
            logger.warning(message)
