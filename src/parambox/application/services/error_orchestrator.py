"""
Error Orchestrator - Application Service

Receives parameter error records from the domain handler, logs them and
keeps per-code and per-parameter tallies for reporting.
"""

from __future__ import annotations
from collections import Counter, deque
from typing import Any, Deque, Dict, List, Optional
import logging

from ...config import ErrorReportingConfig
from ...domain.services.error_handler import (
    DomainError,
    ErrorHandlingService,
    ErrorLogger,
    ErrorSeverity,
    get_default_error_handler,
)

_LOG_LEVELS = {
    ErrorSeverity.LOW: logging.INFO,
    ErrorSeverity.MEDIUM: logging.WARNING,
}


class ErrorOrchestrator(ErrorLogger):
    """
    ErrorLogger implementation backed by the logging module

    Undeclared keys log at WARNING, reads of unset keys at INFO.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        enable_metrics: bool = True,
        max_history_size: int = 1000
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.enable_metrics = enable_metrics
        self.domain_handler = ErrorHandlingService(logger=self)

        self._by_code: Counter = Counter()
        self._by_parameter: Counter = Counter()
        self._history: Deque[DomainError] = deque(maxlen=max_history_size)

    @classmethod
    def from_config(
        cls, config: ErrorReportingConfig, logger: Optional[logging.Logger] = None
    ) -> ErrorOrchestrator:
        return cls(
            logger=logger,
            enable_metrics=config.enable_metrics,
            max_history_size=config.max_history_size
        )

    def log_error(self, error: DomainError) -> None:
        self.logger.log(
            _LOG_LEVELS.get(error.severity, logging.WARNING),
            f"[{error.code}] {error.message}",
            extra={"error_code": error.code, "parameter": repr(error.parameter)}
        )
        self._history.append(error)
        if self.enable_metrics:
            self._by_code[error.code] += 1
            self._by_parameter[repr(error.parameter)] += 1

    def get_error_statistics(self, limit: int = 5) -> Dict[str, Any]:
        """Totals by error code and the parameters that failed most often"""
        return {
            "total_errors": sum(self._by_code.values()),
            "error_counts_by_code": dict(self._by_code),
            "most_failed_parameters": [
                {"parameter": name, "count": count}
                for name, count in self._by_parameter.most_common(limit)
            ],
            "history_size": len(self._history),
        }

    def get_recent_errors(self, limit: int = 50) -> List[Dict[str, Any]]:
        """Newest first"""
        return [
            {
                "code": error.code,
                "message": error.message,
                "parameter": error.parameter,
                "timestamp": error.timestamp.isoformat(),
            }
            for error in list(self._history)[::-1][:limit]
        ]

    def clear_error_history(self) -> None:
        self._history.clear()
        self._by_code.clear()
        self._by_parameter.clear()


def install_error_orchestrator(
    config: Optional[ErrorReportingConfig] = None,
    logger: Optional[logging.Logger] = None
) -> ErrorOrchestrator:
    """Route errors from containers using the default handler to a new orchestrator"""
    if config is None:
        orchestrator = ErrorOrchestrator(logger=logger)
    else:
        orchestrator = ErrorOrchestrator.from_config(config, logger=logger)
    get_default_error_handler().install_logger(orchestrator)
    return orchestrator
