# src/tasktime/tasks/task_files.py

from __future__ import annotations

import json
import logging
import math
import os
from datetime import datetime
from pathlib import Path
from typing import Any

from ..core.errors import StoreIOError
from .task_models import Task, TaskCategory
from .task_store import TaskStore

logger = logging.getLogger(__name__)

_NANOS = 1_000_000_000


class JsonTaskRepository:
    """
    One pretty-printed JSON file per category: <data_dir>/<category>.json.

    The file is an object mapping the id (as a string) to a task record.
    Timestamps use the {"secs_since_epoch", "nanos_since_epoch"} shape so files
    written by earlier releases keep loading.

    A missing file is an empty store. Anything unreadable is a StoreIOError;
    no empty store is fabricated in its place.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, category: TaskCategory) -> Path:
        return self._data_dir / f"{TaskCategory(category).value}.json"

    # ---- (de)serialization ----

    @staticmethod
    def _ts_to_json(ts: float | None) -> dict[str, int] | None:
        if ts is None:
            return None
        secs = int(ts)
        nanos = min(_NANOS - 1, max(0, int(round((ts - secs) * _NANOS))))
        return {"secs_since_epoch": secs, "nanos_since_epoch": nanos}

    @staticmethod
    def _json_to_ts(raw: Any) -> float | None:
        if raw is None:
            return None
        if isinstance(raw, dict):
            secs = raw["secs_since_epoch"]
            nanos = raw.get("nanos_since_epoch", 0)
            if not isinstance(secs, int) or isinstance(secs, bool):
                raise ValueError("secs_since_epoch must be an integer")
            if not isinstance(nanos, int) or isinstance(nanos, bool) or not 0 <= nanos < _NANOS:
                raise ValueError("nanos_since_epoch must be an integer in [0, 1e9)")
            try:
                ts = secs + nanos / _NANOS
            except OverflowError as e:
                raise ValueError(f"timestamp {secs} out of range") from e
        elif isinstance(raw, (int, float)) and not isinstance(raw, bool):
            try:
                ts = float(raw)
            except OverflowError as e:
                raise ValueError(f"timestamp {raw} out of range") from e
        else:
            raise ValueError(f"unsupported timestamp {raw!r}")

        if not math.isfinite(ts):
            raise ValueError(f"timestamp {raw!r} is not finite")
        try:
            datetime.fromtimestamp(ts)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"timestamp {ts} out of range") from e
        return ts

    @classmethod
    def _task_to_record(cls, task: Task) -> dict[str, Any]:
        return {
            "id": task.id,
            "name": task.name,
            "total_duration_seconds": task.total_duration_seconds,
            "running": task.running,
            "last_run": cls._ts_to_json(task.last_run),
        }

    @classmethod
    def _record_to_task(cls, key: str, record: Any) -> Task:
        if not isinstance(record, dict):
            raise ValueError(f"task {key} is not an object")
        task_id = record["id"]
        total = record["total_duration_seconds"]
        running = record["running"]
        name = record["name"]
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 0:
            raise ValueError(f"task {key} has an invalid id")
        if str(task_id) != key:
            raise ValueError(f"task key {key} does not match id {task_id}")
        if not isinstance(total, int) or isinstance(total, bool):
            raise ValueError(f"task {key} has an invalid duration")
        if not isinstance(running, bool) or not isinstance(name, str):
            raise ValueError(f"task {key} has invalid fields")
        return Task(
            id=task_id,
            name=name,
            total_duration_seconds=total,
            running=running,
            last_run=cls._json_to_ts(record.get("last_run")),
        )

    # ---- public API ----

    def load(self, category: TaskCategory) -> TaskStore:
        path = self.path_for(category)
        if not path.exists():
            logger.debug("No %s store at %s, starting empty", category, path)
            return TaskStore()
        try:
            data = json.loads(path.read_text("utf-8"))
            if not isinstance(data, dict):
                raise ValueError("top-level value is not an object")
            store = TaskStore(self._record_to_task(str(k), v) for k, v in data.items())
        except (OSError, UnicodeDecodeError) as e:
            raise StoreIOError(f"Could not read {category} tasks from {path}: {e}", path) from e
        except (ValueError, KeyError, TypeError) as e:
            raise StoreIOError(f"Corrupt {category} tasks file {path}: {e}", path) from e
        logger.info("Loaded %d %s tasks from %s", len(store), category, path)
        return store

    def save(self, category: TaskCategory, store: TaskStore) -> None:
        path = self.path_for(category)
        payload = {str(t.id): self._task_to_record(t) for t in store.tasks()}
        tmp = path.with_suffix(".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, path)
        except OSError as e:
            raise StoreIOError(f"Could not write {category} tasks to {path}: {e}", path) from e
        logger.info("Saved %d %s tasks to %s", len(store), category, path)
