"""Pytest configuration and fixtures."""

import io
import os

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from decimal_weight.config import reset_settings
from decimal_weight.logging import configure_logging


def _clear_env():
    for key in list(os.environ.keys()):
        if key.startswith("DECIMAL_WEIGHT_"):
            del os.environ[key]


@pytest.fixture(autouse=True)
def clean_settings():
    """Every test starts from default settings and leaves logging detached."""
    _clear_env()
    reset_settings()
    yield
    _clear_env()
    reset_settings()
    configure_logging(stream=io.StringIO())


@pytest.fixture
def log_stream():
    """Route structured JSON logs into a StringIO and return it."""
    stream = io.StringIO()
    configure_logging(log_level="DEBUG", log_format="json", stream=stream)
    return stream


@pytest.fixture
def log_entries(log_stream):
    """Return a callable that decodes every JSON log line written so far."""
    import json

    def _read() -> list[dict]:
        return [
            json.loads(line)
            for line in log_stream.getvalue().splitlines()
            if line.strip()
        ]

    return _read
