"""Logging configuration for the kubesail_config package."""
import logging
import sys

from .config import Config

# Loggers that are noisy at INFO while the callback listener runs
NOISY_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "urllib3", "kubernetes")


def setup_logging(debug_mode: bool = False) -> None:
    """Configure root logging for a CLI run.

    Args:
        debug_mode: Log at DEBUG and keep third-party loggers verbose
    """
    log_level = logging.DEBUG if debug_mode else getattr(logging, Config.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format=Config.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True,
    )
    # Disable debug logging for noisy libraries
    if not debug_mode:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
