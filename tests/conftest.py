# tests/conftest.py

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from tasktime import config
from tasktime.cli.bootstrap import create_initial_state
from tasktime.config import Settings
from tasktime.core.state import AppState
from tasktime.tasks.task_files import JsonTaskRepository
from tasktime.tasks.task_models import TaskCategory

from .fakes import FakeClock, FakeConfirmer, FakeTaskRepo


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch):
    """
    Keep every test away from the developer's real settings and logging:
    no TASKTIME_* variables, fresh cached settings, root handlers restored.
    """
    for name in list(os.environ):
        if name.startswith("TASKTIME_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda **_: False)
    config.reset_settings()

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
    config.reset_settings()


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        app_name="tasktime-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path,
        log_dir_override=None,
        default_category=TaskCategory.CURRENT,
        timestamp_format="%d/%m/%Y %H:%M:%S",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def confirmer() -> FakeConfirmer:
    return FakeConfirmer()


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def json_repo(tmp_path: Path) -> JsonTaskRepository:
    return JsonTaskRepository(tmp_path)


@pytest.fixture()
def state(settings: Settings, repo: FakeTaskRepo, clock: FakeClock, confirmer: FakeConfirmer) -> AppState:
    """
    AppState on the "current" category wired with deterministic fakes.
    """
    return create_initial_state(
        settings=settings,
        category=TaskCategory.CURRENT,
        repo=repo,
        clock=clock,
        confirmer=confirmer,
    )
