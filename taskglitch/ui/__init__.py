"""UI layer - PySide6 GUI components"""

from .app import DashboardApp
from .main_window import MainWindow
from .task_dialogs import TaskDetailsDialog, TaskFormDialog

__all__ = ["DashboardApp", "MainWindow", "TaskDetailsDialog", "TaskFormDialog"]
