"""Services layer - Business logic"""

from .activity_log import ActivityItem, ActivityLog, ActivityType
from .dashboard import TaskDashboard
from .filtering import TaskFilter, filter_tasks, sort_tasks
from .task_store import TaskStore

__all__ = [
    "ActivityItem",
    "ActivityLog",
    "ActivityType",
    "TaskDashboard",
    "TaskFilter",
    "TaskStore",
    "filter_tasks",
    "sort_tasks",
]
