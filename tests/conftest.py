"""
Test Configuration and Fixtures

Shared fixtures for the parambox test suite.
"""

import logging

import pytest

from parambox.application.services.error_orchestrator import ErrorOrchestrator
from parambox.domain.entities.parameter_container import ParameterContainer
from parambox.domain.services.error_handler import get_default_error_handler


@pytest.fixture
def taxonomy_keys():
    """Declared keys for the taxonomy scenario"""
    return ["phylum", "family", "genera", "species"]


@pytest.fixture
def taxonomy_container(taxonomy_keys):
    """Fresh container declaring the taxonomy keys"""
    return ParameterContainer(taxonomy_keys)


@pytest.fixture
def error_orchestrator():
    """Error orchestrator with an isolated logger"""
    logger = logging.getLogger("parambox.tests.errors")
    return ErrorOrchestrator(logger=logger)


@pytest.fixture
def reporting_container(error_orchestrator):
    """Container whose errors are reported to the orchestrator"""
    return ParameterContainer(
        ["costs", "benefits"], error_handler=error_orchestrator.domain_handler
    )


@pytest.fixture(autouse=True)
def restore_default_error_logger():
    """Undo any logger installed on the shared default error handler"""
    handler = get_default_error_handler()
    saved = handler.logger
    yield handler
    handler.install_logger(saved)
