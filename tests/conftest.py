from typing import List

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collects loguru messages emitted during a test."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def sample_lines() -> List[str]:
    return [
        "A 10, B 20",
        "C 10, D 10",
        "A 20, D 10",
        "B 20, C 10",
        "C 20, E 10",
    ]
