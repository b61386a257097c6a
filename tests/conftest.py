import io

import pytest

from models.enums import LogLevel
from services.preferences_store import MemoryPreferencesStore, set_default_store, get_default_store
from utils.logger import get_logger


@pytest.fixture(autouse=True)
def fresh_default_store():
    """Each test gets its own process-wide preferences store."""
    previous = get_default_store()
    store = MemoryPreferencesStore()
    set_default_store(store)
    yield store
    set_default_store(previous)


@pytest.fixture
def log_output():
    """
    Capture logger output as plain text at DEBUG level.
    """
    logger = get_logger()
    saved = (logger.min_level, logger.use_colors)
    buffer = io.StringIO()
    logger.set_stream(buffer)
    logger.min_level = LogLevel.DEBUG
    logger.use_colors = False
    yield buffer
    logger.set_stream(None)
    logger.min_level, logger.use_colors = saved


@pytest.fixture
def memory_store():
    return MemoryPreferencesStore()
