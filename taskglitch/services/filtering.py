"""
Sort/Filter Layer - orders and narrows the derived task list for display.
"""

from typing import Iterable, List, Optional

from pydantic import BaseModel

from taskglitch.domain.models import DerivedTask

# Filter value that disables a status/priority dimension
ALL = "All"


def _sort_key(task: DerivedTask):
    return (-task.roi, task.created_at, task.title, task.id)


def sort_tasks(tasks: Iterable[DerivedTask]) -> List[DerivedTask]:
    """
    Order tasks for display.

    Highest ROI first; ties go to the older task, then title, then id, so
    the order is fully determined by the task values.
    """
    return sorted(tasks, key=_sort_key)


class TaskFilter(BaseModel):
    """
    Consumer-level filter state.

    ``status`` and ``priority`` hold an enum value or the ``"All"`` sentinel.
    """
    query: str = ""
    status: str = ALL
    priority: str = ALL

    @property
    def is_active(self) -> bool:
        return bool(self.query) or self.status != ALL or self.priority != ALL

    def matches(self, task: DerivedTask) -> bool:
        query = self.query.lower()
        if query and query not in task.title.lower():
            return False
        if self.status != ALL and task.status.value != self.status:
            return False
        if self.priority != ALL and task.priority.value != self.priority:
            return False
        return True

    def apply(self, tasks: Iterable[DerivedTask]) -> List[DerivedTask]:
        """Keep matching tasks, preserving their order"""
        return [t for t in tasks if self.matches(t)]


def filter_tasks(tasks: Iterable[DerivedTask], query: str = "",
                 status: Optional[str] = None, priority: Optional[str] = None) -> List[DerivedTask]:
    """Shortcut for TaskFilter(...).apply(tasks); None means "All"."""
    task_filter = TaskFilter(query=query, status=status or ALL, priority=priority or ALL)
    return task_filter.apply(tasks)
