from __future__ import annotations

import logging

import pytest

from citylawguide.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logger():
    # CLI entry points attach handlers bound to the captured stderr of the running test.
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
