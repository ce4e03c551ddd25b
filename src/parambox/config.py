"""Configuration primitives.

All runtime configuration is expressed as immutable dataclasses so that
components receive explicit settings during initialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_format: str
    log_file: Optional[Path]


@dataclass(frozen=True)
class ErrorReportingConfig:
    """Error orchestrator configuration."""

    enable_metrics: bool
    max_history_size: int


@dataclass(frozen=True)
class AppConfig:
    """Composite application configuration."""

    logging: LoggingConfig
    errors: ErrorReportingConfig

    @staticmethod
    def default() -> "AppConfig":
        """Build the default configuration for the application."""

        return AppConfig(
            logging=LoggingConfig(
                level="INFO",
                log_format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                log_file=None,
            ),
            errors=ErrorReportingConfig(
                enable_metrics=True,
                max_history_size=1000,
            ),
        )
