"""Logging setup for applications embedding parameter containers."""

import logging
import sys
from typing import List

from parambox.config import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    """Install stdout (and optional file) handlers on the root logger."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.INFO),
        format=config.log_format,
        handlers=handlers,
        force=True,
    )
