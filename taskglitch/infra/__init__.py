"""Infrastructure layer - Configuration and data loading"""

from .config import Settings, get_settings, reload_settings
from .seed import generate_sales_tasks
from .task_source import TaskSource, normalize_tasks

__all__ = [
    "Settings",
    "TaskSource",
    "generate_sales_tasks",
    "get_settings",
    "normalize_tasks",
    "reload_settings",
]
