"""Basic logging configuration."""

import logging


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure logging for the application."""
    # Uvicorn keeps its own access log config; this covers library loggers
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
