"""
Task Store - in-memory task collection with single-level undo.

Architecture Decision: Observer Pattern (Qt Signals)
The store emits signals when state changes, keeping it decoupled from UI.
Derived views (sorted list, metrics) are recomputed from the current list on
every read, so nothing derived can go stale.
"""

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional

from PySide6.QtCore import QObject, Signal

from taskglitch.domain.models import DerivedTask, Metrics, Task, new_task_id, utc_now
from taskglitch.exceptions import TaskSourceError
from taskglitch.infra.seed import generate_sales_tasks
from taskglitch.infra.task_source import TaskSource
from taskglitch.services.derivation import compute_metrics, derive_all
from taskglitch.services.filtering import sort_tasks

logger = logging.getLogger(__name__)


def _field_name(key: str) -> Optional[str]:
    """Resolve a snake_case or camelCase key to a Task field name"""
    if key in Task.model_fields:
        return key
    for name, field in Task.model_fields.items():
        if field.alias == key:
            return name
    return None


class TaskStore(QObject):
    """
    Holds the session's tasks and exposes add/update/delete/undo.

    Only the most recently deleted task can be restored; a second delete
    before undo replaces it.
    """

    # Signals
    tasks_changed = Signal()
    last_deleted_changed = Signal(bool)  # whether an undo is available
    loading_changed = Signal(bool)
    error_occurred = Signal(str)

    def __init__(self, source: TaskSource, seed_count: int = 50, parent=None):
        super().__init__(parent)
        self.source = source
        self.seed_count = seed_count

        self._tasks: List[Task] = []
        self._last_deleted: Optional[Task] = None
        self._loading = False
        self._error: Optional[str] = None

        # Set before the first load is issued; later callers await the same task
        self._load_task: Optional[asyncio.Task] = None
        self._closed = False

    # --- Read side -------------------------------------------------------

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    @property
    def last_deleted(self) -> Optional[Task]:
        return self._last_deleted

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_loaded(self) -> bool:
        return self._load_task is not None and self._load_task.done()

    def get(self, task_id: str) -> Optional[Task]:
        return next((t for t in self._tasks if t.id == task_id), None)

    def derived_sorted(self) -> List[DerivedTask]:
        return sort_tasks(derive_all(self._tasks))

    def metrics(self) -> Metrics:
        return compute_metrics(self._tasks)

    # --- Loading ---------------------------------------------------------

    async def load(self) -> None:
        """
        Load the initial collection, once per store.

        Repeated or concurrent calls await the same load. A failed or empty
        result is replaced by generated placeholder tasks.
        """
        if self._load_task is None:
            self._load_task = asyncio.ensure_future(self._load_once())
        # A cancelled caller must not cancel the load shared with other callers
        await asyncio.shield(self._load_task)

    async def _load_once(self) -> None:
        self._set_loading(True)
        try:
            await self._fill_from_source()
        finally:
            self._set_loading(False)

    async def _fill_from_source(self) -> None:
        error: Optional[str] = None
        try:
            tasks = await self.source.load()
        except TaskSourceError as e:
            logger.warning(f"Initial load failed, using generated tasks: {e}")
            error = str(e)
            tasks = []
        except Exception as e:
            logger.exception("Unexpected error while loading tasks, using generated tasks")
            error = f"Failed to load tasks: {e}"
            tasks = []

        if self._closed:
            logger.debug("Store closed before load finished; discarding result")
            return

        if not tasks:
            logger.info(f"No tasks loaded, generating {self.seed_count} placeholder task(s)")
            tasks = generate_sales_tasks(self.seed_count)

        self._tasks = tasks
        self.tasks_changed.emit()
        if error:
            self._error = error
            self.error_occurred.emit(error)

    def close(self) -> None:
        """Mark the session as torn down; a pending load result is ignored"""
        self._closed = True

    def _set_loading(self, loading: bool) -> None:
        self._loading = loading
        self.loading_changed.emit(loading)

    # --- Mutations -------------------------------------------------------

    def add(self, payload: Mapping[str, Any]) -> Task:
        """
        Append a new task.

        Any id or creation time in the payload is replaced by a fresh id and
        the current time.
        """
        data = dict(payload)
        for key in ("id", "createdAt", "created_at"):
            data.pop(key, None)
        task = Task.model_validate({**data, "id": new_task_id(), "createdAt": utc_now()})
        self._tasks.append(task)
        logger.debug(f"Added task {task.id}")
        self.tasks_changed.emit()
        return task

    def update(self, task_id: str, patch: Mapping[str, Any]) -> Optional[Task]:
        """Merge patch fields into a task. Returns None if the id is unknown."""
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                break
        else:
            return None

        changes: Dict[str, Any] = {}
        for key, value in patch.items():
            name = _field_name(key)
            if name is None or name == "id":
                continue
            changes[name] = value

        updated = Task.model_validate({**task.model_dump(), **changes})
        self._tasks[idx] = updated
        logger.debug(f"Updated task {task_id}: {sorted(changes)}")
        self.tasks_changed.emit()
        return updated

    def delete(self, task_id: str) -> Optional[Task]:
        """Remove a task and keep it as the undo candidate"""
        target = self.get(task_id)
        if target is None:
            return None

        self._tasks = [t for t in self._tasks if t.id != task_id]
        self._last_deleted = target
        logger.debug(f"Deleted task {task_id}")
        self.tasks_changed.emit()
        self.last_deleted_changed.emit(True)
        return target

    def undo_delete(self) -> Optional[Task]:
        """Restore the most recently deleted task, if any"""
        restored = self._last_deleted
        if restored is None:
            return None

        self._tasks.append(restored)
        self._last_deleted = None
        logger.debug(f"Restored task {restored.id}")
        self.tasks_changed.emit()
        self.last_deleted_changed.emit(False)
        return restored

    def clear_last_deleted(self) -> None:
        """Dismiss the undo candidate without restoring it"""
        if self._last_deleted is None:
            return
        self._last_deleted = None
        self.last_deleted_changed.emit(False)
