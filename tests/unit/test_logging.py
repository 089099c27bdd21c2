from __future__ import annotations

import logging

from tiny_graphstats.graph import components
from tiny_graphstats.utils.logging import LOGGER_NAME, get_logger, logger


def test_module_loggers_are_named_after_modules() -> None:
    assert components.log.name == "tiny_graphstats.graph.components"
    assert components.log is logging.getLogger("tiny_graphstats.graph.components")


def test_package_and_child_loggers() -> None:
    assert get_logger() is logger
    assert get_logger(LOGGER_NAME) is logger
    assert get_logger("experiments").name == "tiny_graphstats.experiments"
