"""Logging configuration."""
import logging
import sys
from typing import Optional

from voice_order.core.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    # Set third-party loggers to WARNING
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("konlpy").setLevel(logging.WARNING)
