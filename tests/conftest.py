"""
Pytest configuration and fixtures for phrasebook tests.
"""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_dictionary(fixtures_dir):
    """Return the sample Klingon dictionary as a tuple of entries."""
    from phrasebook import load_dictionary

    return tuple(load_dictionary(fixtures_dir / "dictionary" / "klingon_sample.yaml"))


@pytest.fixture(scope="session")
def sample_config():
    """Return a default EngineConfig for testing."""
    from phrasebook import EngineConfig

    return EngineConfig()
