"""Pytest configuration and shared fixtures."""

import logging
import tempfile
from pathlib import Path

import pytest

from nlpplugins.core.failures import FailureCollector
from nlpplugins.core.schema import Column, Schema


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def input_schema():
    """Input record schema with an 'id' and a 'text' field."""
    return Schema(
        columns=[
            Column(name="id", type="int", nullable=False),
            Column(name="text", type="str"),
        ]
    )


@pytest.fixture
def valid_properties():
    """Raw plugin properties that pass validation against input_schema."""
    return {
        "sourceField": "text",
        "encoding": "UTF8",
        "languageCode": "en",
        "errorHandling": "skip",
        "serviceFilePath": "/etc/keys/sa.json",
    }


@pytest.fixture
def collector():
    """Empty failure collector."""
    return FailureCollector()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging during a test."""
    yield
    logger = logging.getLogger("nlpplugins")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
