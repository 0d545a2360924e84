"""
Dashboard controller - what the main window talks to.

Wraps the TaskStore so every user action is also written to the activity
log, and keeps the search/status/priority filter that decides which tasks
are visible, summarized and exported.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from PySide6.QtCore import QObject, Signal

from taskglitch.domain.models import DerivedTask, Metrics, Task
from taskglitch.services.activity_log import ActivityItem, ActivityLog, ActivityType
from taskglitch.services.derivation import compute_metrics, count_by_status, revenue_by_priority
from taskglitch.services.export_service import export_csv
from taskglitch.services.filtering import ALL, TaskFilter
from taskglitch.services.task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskDashboard(QObject):
    """
    Coordinates store mutations, activity logging and filtering.
    """

    # Signals
    changed = Signal()           # visible tasks or metrics may differ
    activity_changed = Signal()
    undo_available = Signal(bool)

    def __init__(self, store: TaskStore, activity: Optional[ActivityLog] = None, parent=None):
        super().__init__(parent)
        self.store = store
        self.activity = activity or ActivityLog()
        self.filter = TaskFilter()

        self.store.tasks_changed.connect(self.changed.emit)
        self.store.last_deleted_changed.connect(self.undo_available.emit)

    # --- Actions ---------------------------------------------------------

    def add_task(self, payload: Mapping[str, Any]) -> Task:
        task = self.store.add(payload)
        self._record(ActivityType.ADD, f"Added: {task.title}")
        return task

    def update_task(self, task_id: str, patch: Mapping[str, Any]) -> Optional[Task]:
        updated = self.store.update(task_id, patch)
        if updated is not None:
            self._record(ActivityType.UPDATE, f"Updated: {task_id}")
        return updated

    def delete_task(self, task_id: str) -> Optional[Task]:
        deleted = self.store.delete(task_id)
        if deleted is not None:
            self._record(ActivityType.DELETE, f"Deleted: {task_id}")
        return deleted

    def undo_delete(self) -> Optional[Task]:
        restored = self.store.undo_delete()
        if restored is not None:
            self._record(ActivityType.UNDO, "Undo delete")
        return restored

    def dismiss_undo(self) -> None:
        self.store.clear_last_deleted()

    def _record(self, activity_type: ActivityType, summary: str) -> ActivityItem:
        item = self.activity.record(activity_type, summary)
        self.activity_changed.emit()
        return item

    # --- Filter ----------------------------------------------------------

    def set_query(self, query: str) -> None:
        self._set_filter(query=query)

    def set_status_filter(self, status: Optional[str]) -> None:
        self._set_filter(status=status or ALL)

    def set_priority_filter(self, priority: Optional[str]) -> None:
        self._set_filter(priority=priority or ALL)

    def reset_filters(self) -> None:
        self.filter = TaskFilter()
        self.changed.emit()

    def _set_filter(self, **changes) -> None:
        updated = self.filter.model_copy(update=changes)
        if updated != self.filter:
            self.filter = updated
            self.changed.emit()

    # --- Views -----------------------------------------------------------

    def visible_tasks(self) -> List[DerivedTask]:
        """Derived, sorted tasks that pass the current filter"""
        return self.filter.apply(self.store.derived_sorted())

    def visible_metrics(self) -> Metrics:
        return compute_metrics(self.visible_tasks())

    def chart_data(self) -> Dict[str, Dict[str, float]]:
        """Breakdowns for the charts panel, keyed by display label"""
        visible = self.visible_tasks()
        return {
            "revenue_by_priority": {p.value: v for p, v in revenue_by_priority(visible).items()},
            "count_by_status": {s.value: float(c) for s, c in count_by_status(visible).items()},
        }

    def export_visible(self, path: Path) -> Path:
        """Write the visible tasks to a CSV file"""
        return export_csv(path, self.visible_tasks())
