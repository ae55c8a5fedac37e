"""
Root conftest.py - sys.path, env vars, shared fixtures.

Sets up the test environment so all production code can be imported
without GDAL or real input folders.
"""

import os
import sys

import pytest

# Add project root to sys.path so 'core', 'config', 'services', etc. are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from config import reset_config  # noqa: E402
from config.conversion_config import ConversionConfig  # noqa: E402
from tests.factories.vector_fakes import FakeVectorIO  # noqa: E402


@pytest.fixture(autouse=True, scope="session")
def set_minimal_env_vars():
    """
    Set minimal environment variables so config loads predictably.
    """
    defaults = {
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "INFO",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the config singleton around every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def input_folder(tmp_path):
    folder = tmp_path / "GIS KMZs"
    folder.mkdir()
    return folder


@pytest.fixture
def output_folder(tmp_path):
    folder = tmp_path / "GIS SHPs"
    folder.mkdir()
    return folder


@pytest.fixture
def conversion_config(input_folder, output_folder):
    """ConversionConfig pointed at per-test folders."""
    return ConversionConfig(
        input_folder=str(input_folder),
        output_folder=str(output_folder)
    )


@pytest.fixture
def fake_vector_io():
    return FakeVectorIO()
