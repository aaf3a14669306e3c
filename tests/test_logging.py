"""Tests for logging setup."""

import logging

import pytest

from ocean_digest.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("httpx", "httpcore", "werkzeug"):
        logging.getLogger(name).setLevel(logging.NOTSET)


def test_configure_logging_single_handler() -> None:
    configure_logging("info")
    configure_logging("info")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_configure_logging_quiets_http_clients() -> None:
    configure_logging(logging.INFO)

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("werkzeug").level == logging.WARNING


def test_configure_logging_debug_keeps_http_clients() -> None:
    configure_logging("DEBUG")

    assert logging.getLogger("httpx").level == logging.NOTSET
