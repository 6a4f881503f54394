"""
Shared pytest fixtures.

EventBus channels are QObjects, so a session-scoped QCoreApplication
is created first.  The offscreen platform keeps the suite headless on
CI / servers without a display.
"""

from __future__ import annotations

import os
import sys

import pytest

# Force Qt to run without a display before any Qt import happens.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """One QCoreApplication for the entire test session."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    yield app


@pytest.fixture
def bus(qapp):
    """Fresh EventBus for each test."""
    from prompt_rating.events import EventBus

    return EventBus()


@pytest.fixture
def config(tmp_path, bus):
    """Config backed by a temp file."""
    from prompt_rating.config import Config

    return Config(bus, path=tmp_path / "settings.json")


@pytest.fixture
def engine():
    """Bus-less engine at Standard strictness."""
    from prompt_rating.safety import ContentRatingEngine

    return ContentRatingEngine()
