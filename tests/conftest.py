"""Pytest configuration and shared fixtures for all tests."""

# Add project root to path
import sys
from pathlib import Path

import pytest
from loguru import logger

sys.path.insert(0, str(Path(__file__).parent.parent))

from dataproxy.configs import set_config


@pytest.fixture(autouse=True)
def reset_config():
    """Restore the default process-wide configuration around every test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during the test."""
    messages = []
    sink_id = logger.add(
        lambda message: messages.append(message.record),
        level="TRACE",
        format="{message}",
    )
    yield messages
    logger.remove(sink_id)
