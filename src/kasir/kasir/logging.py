"""Loguru logging configuration.

Call setup_logging() once at application startup to configure sinks.
All other modules simply do `from loguru import logger` and log normally.
"""

import sys
from pathlib import Path

from loguru import logger

# Relative to the working directory unless configured otherwise
DEFAULT_LOG_DIR = "logs"


def setup_logging(
    level: str = "WARNING",
    log_to_file: bool = True,
    log_dir: str | Path = DEFAULT_LOG_DIR,
) -> None:
    """Configure loguru with a stderr sink and an optional rotating file sink.

    Args:
        level: Minimum level for the stderr sink. The console is shared with
            the customer prompts, so keep this quiet by default.
        log_to_file: Also write DEBUG and above to kasir.log.
        log_dir: Directory for the rotating log file.
    """
    # Remove the default stderr handler so we can reconfigure it
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )

    if not log_to_file:
        return

    # Rotate every 3 hours, delete after 1 day
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / "kasir.log",
        level="DEBUG",
        rotation="3 hours",
        retention="1 day",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {thread.name} | {name}:{function}:{line} - {message}",
    )
