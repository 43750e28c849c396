import logging
import sys

from environs import Env

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV


def setup_logging(level: str | None = None, env: Env | None = None) -> None:
    """Set up logging for the command line front end.

    ``level`` wins over the ANGLEKIT_LOG_LEVEL environment variable. Does
    nothing when the root logger is already configured.
    """
    if logging.root.handlers:  # Check if logging is already configured
        return

    if level is None:
        env = env or Env()
        level = env.str(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("anglekit").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
