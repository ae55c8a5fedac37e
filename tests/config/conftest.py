"""
Config test fixtures — clean environment via monkeypatch.
"""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all env vars that config modules might read, for isolation."""
    env_vars_to_clear = [
        "KMZ_INPUT_FOLDER", "SHP_OUTPUT_FOLDER", "KMZ_WORKSPACE_SUBFOLDER",
        "KMZ_LEDGER_FILENAME", "KMZ_OUTPUT_DRIVER",
        "DEBUG_MODE", "ENVIRONMENT", "LOG_LEVEL",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
