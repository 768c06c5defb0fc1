"""Pytest configuration and fixtures."""

import logging
from collections.abc import Callable, Generator
from datetime import datetime, timezone
from itertools import count
from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.apis.flashcards.main import get_importer
from app.core.logging import ContextFilter
from app.modules.flashcards.main import FlashcardImporter
from main import app

FIXED_NOW = datetime(2025, 3, 14, 15, 9, 26, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def isolate_root_logger() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging() during a test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before and any(isinstance(f, ContextFilter) for f in handler.filters):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def id_factory() -> Callable[[], str]:
    counter = count(1)
    return lambda: f"card-{next(counter)}"


@pytest.fixture
def importer(id_factory, clock) -> FlashcardImporter:
    return FlashcardImporter(id_factory=id_factory, clock=clock)


@pytest.fixture
def client(importer: FlashcardImporter) -> Generator[TestClient, Any, None]:
    """Create a test client whose importer uses the fixed id and clock sources."""
    app.dependency_overrides[get_importer] = lambda: importer

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
