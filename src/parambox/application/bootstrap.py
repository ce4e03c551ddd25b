"""
Application startup for hosts embedding parameter containers.

Configures logging and routes errors raised by containers that use the
default error handler to an ErrorOrchestrator.
"""

import logging
from typing import Optional

from parambox.application.services.error_orchestrator import (
    ErrorOrchestrator,
    install_error_orchestrator,
)
from parambox.config import AppConfig
from parambox.infrastructure.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def bootstrap(config: Optional[AppConfig] = None) -> ErrorOrchestrator:
    """Apply configuration and return the installed error orchestrator"""
    config = config or AppConfig.default()

    configure_logging(config.logging)
    orchestrator = install_error_orchestrator(config.errors)

    logger.info(f"parambox initialized (log level {config.logging.level})")
    return orchestrator
