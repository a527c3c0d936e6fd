# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for CLI logging setup."""

import logging

import pytest

from luml.cli.logs import LOGGER_NAME, ColorLevelFormatter, configure_logging, verbosity_level

# ###############
# Verbosity mapping
# ###############


@pytest.mark.parametrize(
    ("quiet", "verbosity", "expected"),
    [
        (False, 0, logging.WARNING),
        (False, 1, logging.INFO),
        (False, 2, logging.DEBUG),
        (False, 5, logging.DEBUG),
        (True, 0, logging.CRITICAL + 1),
        (True, 2, logging.CRITICAL + 1),
    ],
)
def test_verbosity_level(quiet: bool, verbosity: int, expected: int) -> None:
    assert verbosity_level(quiet, verbosity) == expected


# ###############
# Formatter
# ###############


def test_formatter_includes_level_and_message() -> None:
    record = logging.LogRecord(LOGGER_NAME, logging.WARNING, __file__, 1, "Hello %s", ("world",), None)
    text = ColorLevelFormatter().format(record)
    assert "WARNING" in text
    assert text.endswith("Hello world")


def test_formatter_time_prefix() -> None:
    record = logging.LogRecord(LOGGER_NAME, logging.INFO, __file__, 1, "msg", None, None)
    text = ColorLevelFormatter().format(record)
    hh, mm, ss = text.split(" ", 1)[0].split(":")
    assert len(hh) == len(mm) == len(ss) == 2


# ###############
# Handler installation
# ###############


def test_configure_installs_single_handler() -> None:
    configure_logging(verbosity=1)
    logger = configure_logging(verbosity=2)
    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, ColorLevelFormatter)
    assert logger.level == logging.DEBUG


def test_configured_logger_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbosity=1)
    logging.getLogger("luml.compiler.build").info("Compiling %s", "a.luml")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Compiling a.luml" in captured.err


def test_quiet_logger_writes_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(quiet=True)
    logging.getLogger("luml.cli.main").error("boom")
    assert capsys.readouterr().err == ""
