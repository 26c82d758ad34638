"""
zpool-summary test configuration and fixtures
"""

import logging

import pytest
from unittest.mock import Mock, AsyncMock

from tests.fixtures.command_output import (
    CAPACITY_OUTPUT,
    HEALTHY_STATUS_OUTPUT,
    DEGRADED_STATUS_OUTPUT
)


@pytest.fixture
def capacity_output():
    return CAPACITY_OUTPUT


@pytest.fixture
def healthy_status_output():
    return HEALTHY_STATUS_OUTPUT


@pytest.fixture
def degraded_status_output():
    return DEGRADED_STATUS_OUTPUT


@pytest.fixture
def mock_logger():
    """Create mock logger."""
    logger = Mock()
    logger.debug = Mock()
    logger.info = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    logger.exception = Mock()
    return logger


@pytest.fixture
def mock_executor():
    """Create mock command executor."""
    executor = Mock()
    executor.execute_system = AsyncMock()
    return executor


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers a ServiceFactory attached so they never outlive the captured stderr."""
    yield
    package_logger = logging.getLogger("zpool_summary")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
