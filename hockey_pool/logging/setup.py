import sys
import logging
from typing import Any, Optional

from loguru import logger

from hockey_pool.config.settings import settings

MASK = "********"


def sensitive_data_filter(record: dict[str, Any]) -> bool:
    """Filter function to mask secret settings in log records."""
    secrets = [settings.github_token]

    for secret in secrets:
        if secret and secret in record["message"]:
            record["message"] = record["message"].replace(secret, MASK)

    # Mask explicit token-like keys passed through logger.bind()/extra
    extra = record.get("extra")
    if isinstance(extra, dict):
        for key in list(extra):
            if any(word in key.lower() for word in ("token", "secret", "password")):
                extra[key] = MASK

    return True  # Keep the record after masking


class InterceptHandler(logging.Handler):
    """Routes standard logging records (httpx, httpcore) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: Optional[str] = None) -> None:
    """Configures Loguru logger based on application settings."""
    level = (level or settings.log_level).upper()
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=False,
        filter=sensitive_data_filter,
    )

    logger.info(f"Logging initialized with level: {level}")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.debug("Standard logging intercepted.")
