"""Domain layer - Pure business entities"""

from .models import (
    DerivedTask,
    Metrics,
    PerformanceGrade,
    Priority,
    Status,
    Task,
    UserPreferences,
)

__all__ = [
    "DerivedTask",
    "Metrics",
    "PerformanceGrade",
    "Priority",
    "Status",
    "Task",
    "UserPreferences",
]
