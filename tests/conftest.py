import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_deriva_logger():
    # La CLI instala un RichHandler sobre el logger "deriva"
    logger = logging.getLogger("deriva")
    yield
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
