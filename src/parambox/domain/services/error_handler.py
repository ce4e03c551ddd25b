"""
Parameter Errors - Domain Service

Builds the immutable error records behind UndeclaredParameterError and
UninitializedParameterError. Records are forwarded to an injected
ErrorLogger before the exception is raised.
"""

from __future__ import annotations
from typing import Any, Dict, Hashable, Optional, Protocol, runtime_checkable
from enum import Enum
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorSeverity(Enum):
    """How loudly a parameter error is logged"""
    LOW = "low"
    MEDIUM = "medium"


class DomainError(BaseModel):
    """Immutable record of one failed parameter access"""
    code: str
    message: str
    severity: ErrorSeverity
    parameter: Any = None
    timestamp: datetime = Field(default_factory=datetime.now)

    model_config = {"frozen": True}


@runtime_checkable
class ErrorLogger(Protocol):
    """Protocol for error logging - allows injection without dependencies"""
    def log_error(self, error: DomainError) -> None:
        ...


# code, message template, severity
_ERROR_DEFINITIONS: Dict[str, tuple] = {
    "UNDECLARED_PARAMETER_ERROR": (
        "PARAM_UNDECLARED", "Parameter {key!r} is not declared", ErrorSeverity.MEDIUM
    ),
    "UNINITIALIZED_PARAMETER_ERROR": (
        "PARAM_UNINITIALIZED", "Parameter {key!r} has not been initialized", ErrorSeverity.LOW
    ),
}


class ErrorHandlingService:
    """Creates parameter error records and reports them to an optional logger"""

    def __init__(self, logger: Optional[ErrorLogger] = None):
        self._logger = logger

    @property
    def logger(self) -> Optional[ErrorLogger]:
        return self._logger

    def install_logger(self, logger: Optional[ErrorLogger]) -> None:
        self._logger = logger

    def create_error(self, error_code: str, key: Hashable) -> DomainError:
        """
        Build the error record for a predefined code

        Raises:
            KeyError: If error_code has no definition
        """
        code, template, severity = _ERROR_DEFINITIONS[error_code]
        return DomainError(
            code=code,
            message=template.format(key=key),
            severity=severity,
            parameter=key,
        )

    def report_error(self, error: DomainError) -> DomainError:
        if self._logger:
            self._logger.log_error(error)
        return error


_default_handler = ErrorHandlingService()


def get_default_error_handler() -> ErrorHandlingService:
    """Handler used by containers that were not given one"""
    return _default_handler


class ParameterDomainError(Exception):
    """Base exception carrying the offending key and its error record"""

    error_code = ""

    def __init__(self, key: Hashable, domain_error: Optional[DomainError] = None):
        self.key = key
        self.domain_error = domain_error or _default_handler.create_error(self.error_code, key)
        super().__init__(self.domain_error.message)

    @property
    def code(self) -> str:
        return self.domain_error.code


class UndeclaredParameterError(ParameterDomainError, LookupError):
    """Raised when a key outside the declared vocabulary is set or read"""
    error_code = "UNDECLARED_PARAMETER_ERROR"


class UninitializedParameterError(ParameterDomainError, LookupError):
    """Raised when a declared key is read before it has been assigned"""
    error_code = "UNINITIALIZED_PARAMETER_ERROR"


def _build_error(error_cls, key: Hashable, error_handler: Optional[ErrorHandlingService]):
    error_handler = error_handler or _default_handler
    domain_error = error_handler.create_error(error_cls.error_code, key)
    return error_cls(key, error_handler.report_error(domain_error))


def create_undeclared_error(
    key: Hashable, error_handler: Optional[ErrorHandlingService] = None
) -> UndeclaredParameterError:
    """Create and report an undeclared parameter error"""
    return _build_error(UndeclaredParameterError, key, error_handler)


def create_uninitialized_error(
    key: Hashable, error_handler: Optional[ErrorHandlingService] = None
) -> UninitializedParameterError:
    """Create and report an uninitialized parameter error"""
    return _build_error(UninitializedParameterError, key, error_handler)
