import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Configure structured logging defaults for the application."""
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
