# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from dataclasses import dataclass
from logging import getLogger

# Third party imports
import pytest

# Local imports
from typed_json.infrastructure import DecoderCache


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - just reset logging"""
    root_logger = getLogger()
    # Remove all handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    yield


@pytest.fixture
def decoder_cache():
    """Fresh decoder cache owned by a single test"""
    return DecoderCache()


@dataclass
class CallCounter:
    """Wraps a decoder and counts how often it runs"""

    decoder: object
    calls: int = 0

    def __call__(self, value):
        self.calls += 1
        return self.decoder(value)


@pytest.fixture
def call_counter():
    """Factory for decoders that record how often they were invoked"""
    return CallCounter
