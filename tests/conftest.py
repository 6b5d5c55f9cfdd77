import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo setup_logging so caplog keeps seeing duorank records."""
    logger = logging.getLogger("duorank")
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
