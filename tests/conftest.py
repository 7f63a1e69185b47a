"""Pytest configuration and fixtures."""

import io
import logging

import pytest

from microunit.catalog import Catalog
from microunit.driver import Driver


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset microunit loggers after each test so handlers do not leak."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("microunit"):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()
            logger.propagate = True


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def driver(catalog, output):
    return Driver(catalog, stream=output)
