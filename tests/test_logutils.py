"""Tests for configure_logging."""

import logging

import pytest

from chardraft.logutils import configure_logging, logger


@pytest.fixture
def restore_level():
    level = logger.level
    yield
    logger.setLevel(level)


class TestConfigureLogging:

    @pytest.mark.parametrize(
        "level,expected",
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR)],
    )
    def test_sets_package_level(self, restore_level, level, expected):
        configure_logging(level)
        assert logger.level == expected

    def test_unknown_name_falls_back_to_info(self, restore_level):
        configure_logging("chatty")
        assert logger.level == logging.INFO
