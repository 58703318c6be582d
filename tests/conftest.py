"""Shared pytest fixtures for globfind tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo any handler the CLI installs so caplog keeps seeing records."""
    package_logger = logging.getLogger("globfind")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = propagate
