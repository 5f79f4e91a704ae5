"""Shared fixtures for envspec tests."""

import pytest

from envspec.logger import create_logger


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Rebind the "envspec" logger after each test.

    register_environment() reconfigures it, and a handler left pointing at a
    per-test capture stream would outlive that stream.
    """
    yield
    create_logger("envspec")
