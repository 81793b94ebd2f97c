# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from task_tracker.app.main import create_app
from task_tracker.config import Settings
from task_tracker.infra.task_store_memory import InMemoryTaskStore
from task_tracker.services.task_service import TaskService


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def service(store: InMemoryTaskStore) -> TaskService:
    return TaskService(store)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing logs at a per-test directory."""
    return Settings(log_level="DEBUG", log_dir=tmp_path / "logs")


@pytest.fixture()
def client(settings: Settings, store: InMemoryTaskStore):
    """
    TestClient over a fresh app sharing the `store` fixture, so tests can
    arrange state directly and assert through HTTP (or the other way round).
    """
    app = create_app(settings=settings, store=store)
    with TestClient(app) as c:
        yield c
    # create_app owns the root handlers; release the log file
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
