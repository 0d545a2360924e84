"""
Dashboard Application - Main UI entry point.

Architecture Decision: Presentation Layer
This layer only handles UI logic. Business logic is delegated to Services.
"""

import sys
import asyncio
import logging
from typing import Optional
from PySide6.QtWidgets import QApplication, QMessageBox
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtCore import QTimer, Qt

from taskglitch.i18n import set_language
from taskglitch.infra.config import Settings, get_settings
from taskglitch.infra.task_source import TaskSource
from taskglitch.services import ActivityLog, TaskDashboard, TaskStore
from .main_window import MainWindow

logger = logging.getLogger(__name__)


class DashboardApp:
    """
    Main application class wiring settings, services and the main window.

    Follows Clean Architecture: UI delegates to Services, Services use the task source.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.app = QApplication.instance() or QApplication(sys.argv)
        self.settings = settings or get_settings()
        prefs = self.settings.preferences

        # Event loop for the async initial load
        self.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self.loop)

        set_language(prefs.language)
        self._apply_theme(prefs.theme)
        self._apply_font_scale(prefs.font_scale)

        # Services
        source = TaskSource(self.settings.data_source, timeout=self.settings.fetch_timeout)
        self.store = TaskStore(source, seed_count=self.settings.seed_task_count)
        self.dashboard = TaskDashboard(self.store, ActivityLog(limit=self.settings.activity_limit))

        self.main_window = MainWindow(self.dashboard, user_name=prefs.user_name)
        self.main_window.closed.connect(self._quit_application)

        # Initialize once the Qt loop is running
        QTimer.singleShot(0, self._async_init)

    def _apply_theme(self, theme: str):
        """Apply 'light', 'dark', or 'auto' (follows system) using Qt's Fusion style"""
        self.app.setStyle("Fusion")
        hints = QGuiApplication.styleHints()
        if not hasattr(hints, "setColorScheme"):
            # Qt < 6.8 can only follow the system
            return
        if theme == "dark":
            hints.setColorScheme(Qt.ColorScheme.Dark)
        elif theme == "light":
            hints.setColorScheme(Qt.ColorScheme.Light)
        else:
            hints.setColorScheme(Qt.ColorScheme.Unknown)

    def _apply_font_scale(self, scale: float):
        font = QFont(self.app.font())
        if font.pointSizeF() > 0:
            font.setPointSizeF(font.pointSizeF() * scale)
            self.app.setFont(font)

    def _async_init(self):
        """Load the initial tasks (runs once)"""
        try:
            self.loop.run_until_complete(self.store.load())
        except Exception as e:
            logger.exception("Initialization failed")
            QMessageBox.critical(None, "Initialization Error",
                                 f"Failed to initialize application:\n{e}")

    def _quit_application(self):
        """Quit the application"""
        self.store.close()
        if not self.loop.is_closed():
            self.loop.close()
        self.app.quit()

    def run(self) -> int:
        """Show the window and run the Qt event loop"""
        self.main_window.show()
        return self.app.exec()
