# tests/test_task_models.py

from __future__ import annotations

import pytest

from tasktime.core.errors import (
    AlreadyRunningError,
    InsufficientDurationError,
    InvalidFormatError,
    NotRunningError,
    TaskBusyError,
)
from tasktime.tasks.task_models import Task, TaskCategory

T0 = 1_700_000_000.0


def test_start_then_stop_commits_elapsed_time() -> None:
    task = Task(id=1, name="report")
    task.start(now=T0)
    assert task.running
    assert task.last_run == T0

    committed = task.stop(now=T0 + 125.7)

    assert committed == 125
    assert task.total_duration_seconds == 125
    assert not task.running


def test_stop_accumulates_across_runs() -> None:
    task = Task(id=1, name="report", total_duration_seconds=60)
    task.start(now=T0)
    task.stop(now=T0 + 30)
    task.start(now=T0 + 1000)
    task.stop(now=T0 + 1090)
    assert task.total_duration_seconds == 180


def test_stop_with_last_run_injected_in_the_past() -> None:
    task = Task(id=3, name="old", running=True, last_run=T0 - 3600)
    task.stop(now=T0)
    assert task.total_duration_seconds == 3600


def test_start_when_running_fails_and_keeps_start_time() -> None:
    task = Task(id=1, name="x")
    task.start(now=T0)
    with pytest.raises(AlreadyRunningError):
        task.start(now=T0 + 50)
    assert task.last_run == T0


def test_stop_when_stopped_fails() -> None:
    task = Task(id=1, name="x", total_duration_seconds=10)
    with pytest.raises(NotRunningError):
        task.stop(now=T0)
    assert task.total_duration_seconds == 10


def test_cancel_discards_running_time() -> None:
    task = Task(id=1, name="x", total_duration_seconds=600)
    task.start(now=T0)
    task.cancel()
    assert not task.running
    assert task.total_duration_seconds == 600
    # last start stays available for display
    assert task.last_run == T0


def test_cancel_when_stopped_fails() -> None:
    task = Task(id=1, name="x")
    with pytest.raises(NotRunningError):
        task.cancel()


def test_current_duration_includes_running_time() -> None:
    task = Task(id=1, name="x", total_duration_seconds=100)
    assert task.current_duration(now=T0) == 100
    task.start(now=T0)
    assert task.current_duration(now=T0 + 20) == 120
    assert task.base_duration == 100


def test_current_duration_clamps_backward_clock() -> None:
    task = Task(id=1, name="x", total_duration_seconds=100, running=True, last_run=T0)
    assert task.current_duration(now=T0 - 500) == 100
    task.stop(now=T0 - 500)
    assert task.total_duration_seconds == 100


def test_rename() -> None:
    task = Task(id=1, name="x")
    task.rename("y")
    assert task.name == "y"


def test_add_time() -> None:
    task = Task(id=1, name="x", total_duration_seconds=30)
    assert task.add_time("1h30m") == 5430
    assert task.total_duration_seconds == 5430


def test_add_time_while_running_is_allowed() -> None:
    task = Task(id=1, name="x", running=True, last_run=T0)
    task.add_time("10m")
    assert task.total_duration_seconds == 600
    assert task.running


def test_add_time_bad_token_leaves_total() -> None:
    task = Task(id=1, name="x", total_duration_seconds=30)
    with pytest.raises(InvalidFormatError):
        task.add_time("1x")
    assert task.total_duration_seconds == 30


def test_subtract_time() -> None:
    task = Task(id=1, name="x", total_duration_seconds=3600)
    assert task.subtract_time("45m") == 900


def test_subtract_time_to_exactly_zero() -> None:
    task = Task(id=1, name="x", total_duration_seconds=3600)
    assert task.subtract_time("1h") == 0


def test_subtract_more_than_total_is_rejected() -> None:
    task = Task(id=1, name="x", total_duration_seconds=600)
    with pytest.raises(InsufficientDurationError) as exc:
        task.subtract_time("11m")
    assert exc.value.requested == 660
    assert exc.value.available == 600
    assert task.total_duration_seconds == 600


def test_set_time_on_stopped_task() -> None:
    task = Task(id=1, name="x", total_duration_seconds=999)
    assert task.set_time("2h") == 7200


def test_set_time_while_running_is_rejected() -> None:
    task = Task(id=1, name="x", total_duration_seconds=50)
    task.start(now=T0)
    with pytest.raises(TaskBusyError):
        task.set_time("2h")
    assert task.total_duration_seconds == 50
    assert task.running


def test_set_time_bad_token_leaves_total() -> None:
    task = Task(id=1, name="x", total_duration_seconds=50)
    with pytest.raises(InvalidFormatError):
        task.set_time("soon")
    assert task.total_duration_seconds == 50


def test_invariants_are_checked_on_construction() -> None:
    with pytest.raises(ValueError):
        Task(id=1, name="x", running=True, last_run=None)
    with pytest.raises(ValueError):
        Task(id=1, name="x", total_duration_seconds=-1)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("current", TaskCategory.CURRENT), ("archive", TaskCategory.ARCHIVE), (" Archive ", TaskCategory.ARCHIVE)],
)
def test_category_parse(raw: str, expected: TaskCategory) -> None:
    assert TaskCategory.parse(raw) is expected


@pytest.mark.parametrize("raw", ["", "old", None])
def test_category_parse_rejects_unknown(raw) -> None:
    with pytest.raises(InvalidFormatError):
        TaskCategory.parse(raw)
