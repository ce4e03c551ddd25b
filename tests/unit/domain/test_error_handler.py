"""
Tests for the Error Handling Service

Tests error records, the typed exceptions and reporting through an
injected logger.
"""

import pytest
from unittest.mock import Mock
from pydantic import ValidationError

from parambox.domain.entities.parameter_container import ParameterContainer
from parambox.domain.services.error_handler import (
    ErrorHandlingService,
    ErrorLogger,
    ErrorSeverity,
    ParameterDomainError,
    UndeclaredParameterError,
    UninitializedParameterError,
    create_undeclared_error,
    create_uninitialized_error,
    get_default_error_handler,
)


class TestErrorHandlingService:
    """Test ErrorHandlingService"""

    def setup_method(self):
        self.handler = ErrorHandlingService()

    def test_undeclared_record(self):
        error = self.handler.create_error("UNDECLARED_PARAMETER_ERROR", "kingdom")

        assert error.code == "PARAM_UNDECLARED"
        assert error.severity == ErrorSeverity.MEDIUM
        assert error.parameter == "kingdom"
        assert error.message == "Parameter 'kingdom' is not declared"

    def test_uninitialized_record(self):
        error = self.handler.create_error("UNINITIALIZED_PARAMETER_ERROR", "phylum")

        assert error.code == "PARAM_UNINITIALIZED"
        assert error.severity == ErrorSeverity.LOW
        assert error.message == "Parameter 'phylum' has not been initialized"

    def test_unknown_code_fails(self):
        with pytest.raises(KeyError):
            self.handler.create_error("SOMETHING_ELSE", "x")

    def test_report_error_without_logger(self):
        error = self.handler.create_error("UNDECLARED_PARAMETER_ERROR", "x")

        assert self.handler.report_error(error) is error

    def test_install_logger(self):
        logger = Mock(spec=ErrorLogger)
        self.handler.install_logger(logger)
        error = self.handler.create_error("UNDECLARED_PARAMETER_ERROR", "x")

        self.handler.report_error(error)

        assert self.handler.logger is logger
        logger.log_error.assert_called_once_with(error)

    def test_record_is_frozen(self):
        error = self.handler.create_error("UNDECLARED_PARAMETER_ERROR", "x")

        with pytest.raises(ValidationError):
            error.message = "changed"


class TestParameterExceptions:
    """Test exception classes"""

    def test_undeclared_default_record(self):
        error = UndeclaredParameterError("kingdom")

        assert error.key == "kingdom"
        assert error.code == "PARAM_UNDECLARED"
        assert error.domain_error.parameter == "kingdom"
        assert "kingdom" in str(error)
        assert isinstance(error, ParameterDomainError)
        assert isinstance(error, LookupError)

    def test_uninitialized_default_record(self):
        error = UninitializedParameterError("phylum")

        assert error.key == "phylum"
        assert error.code == "PARAM_UNINITIALIZED"
        assert error.domain_error.severity == ErrorSeverity.LOW

    def test_factories_report_to_logger(self):
        logger = Mock(spec=ErrorLogger)
        handler = ErrorHandlingService(logger=logger)

        undeclared = create_undeclared_error("a", handler)
        uninitialized = create_uninitialized_error("b", handler)

        assert logger.log_error.call_count == 2
        assert undeclared.domain_error.parameter == "a"
        assert uninitialized.domain_error.parameter == "b"

    def test_container_reports_through_handler(self):
        """Test container raise sites report each error once"""
        logger = Mock(spec=ErrorLogger)
        container = ParameterContainer(["a"], error_handler=ErrorHandlingService(logger=logger))

        with pytest.raises(UndeclaredParameterError):
            container.set({"a": 1, "b": 2})
        with pytest.raises(UninitializedParameterError):
            container.get("a")

        reported = [call.args[0].code for call in logger.log_error.call_args_list]
        assert reported == ["PARAM_UNDECLARED", "PARAM_UNINITIALIZED"]

    def test_container_defaults_to_shared_handler(self, restore_default_error_logger):
        """Test containers without a handler report through the shared one"""
        logger = Mock(spec=ErrorLogger)
        restore_default_error_logger.install_logger(logger)
        container = ParameterContainer(["a"])

        assert container.error_handler is get_default_error_handler()
        with pytest.raises(UndeclaredParameterError):
            container.get("b")

        logger.log_error.assert_called_once()
        assert logger.log_error.call_args.args[0].parameter == "b"
