# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared pytest fixtures."""

import logging
from collections.abc import Iterator

import pytest

from luml.cli.logs import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_luml_logger() -> Iterator[None]:
    """Drop handlers installed by the CLI so later tests do not write to stale streams."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
