"""Shared fixtures for the test suite."""

import pytest

from transcription.types.parameters import active_config, set_active_config


@pytest.fixture(autouse=True)
def restore_active_config():
    """Undo any change a test makes to the process-wide storage config."""
    previous = active_config()
    yield
    set_active_config(previous)
