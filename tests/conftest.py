"""Root test configuration: loguru sink reset between tests"""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore loguru's default stderr sink after CLI runs replace it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
