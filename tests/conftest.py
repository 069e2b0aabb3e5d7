"""Shared test fixtures: isolated environment and logging state."""

from __future__ import annotations

import logging
import os

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test without URITEXT_* variables or a stray .env file."""
    for key in list(os.environ):
        if key.startswith("URITEXT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger and structlog changes made by setup_logging."""
    root_logger = logging.getLogger()
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)
    structlog.reset_defaults()


@pytest.fixture
def runner():
    return CliRunner()
