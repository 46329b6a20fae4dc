import pytest
from loguru import logger as _logger

from headerstore.settings import Settings
from headerstore.utils.log import PACKAGE


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def log_messages():
    """Collect the messages logged through the headerstore logger."""
    messages = []
    handler_id = _logger.add(
        lambda message: messages.append(message.record["message"]),
        level="DEBUG",
        filter=lambda record: record["extra"].get("package") == PACKAGE,
    )
    yield messages
    _logger.remove(handler_id)
