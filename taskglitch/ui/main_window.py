"""
Main Window - the task dashboard.

Architecture Decision: Thin presentation
The window only renders what TaskDashboard exposes and forwards user actions
back to it. It never touches the task list directly.
"""

from pathlib import Path
from typing import List, Optional

from PySide6.QtWidgets import (
    QComboBox, QFileDialog, QHBoxLayout, QHeaderView, QLabel, QLineEdit,
    QMainWindow, QMessageBox, QPushButton, QSplitter, QTableWidget,
    QTableWidgetItem, QVBoxLayout, QWidget
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont

from taskglitch.domain.models import DerivedTask, Priority, Status
from taskglitch.i18n import tr
from taskglitch.services.dashboard import TaskDashboard
from taskglitch.services.filtering import ALL
from taskglitch.utils import format_currency, format_hours
from .task_dialogs import TaskDetailsDialog, TaskFormDialog
from .widgets import ActivityPanel, ChartsPanel, MetricsBar, StatusLabel, UndoBar


class MainWindow(QMainWindow):
    """
    Dashboard with metrics, filters, the task table, charts and activity.
    """

    closed = Signal()

    COLUMNS = ["title", "revenue", "time", "roi", "priority", "status", "actions"]

    def __init__(self, dashboard: TaskDashboard, user_name: str = "Guest", parent=None):
        super().__init__(parent)
        self.dashboard = dashboard
        self.user_name = user_name
        self._visible: List[DerivedTask] = []

        self.setWindowTitle(tr("app.name"))
        self.resize(1100, 760)

        self._setup_ui()
        self._connect_signals()
        self.set_loading(self.dashboard.store.loading)
        self.refresh()

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        # Header: title + welcome, export button on the right
        header = QHBoxLayout()
        title_box = QVBoxLayout()
        title = QLabel(tr("app.name"))
        title_font = QFont()
        title_font.setPointSize(20)
        title_font.setBold(True)
        title.setFont(title_font)
        title_box.addWidget(title)
        title_box.addWidget(QLabel(tr("app.welcome", name=self.user_name)))
        header.addLayout(title_box, stretch=1)

        self.export_btn = QPushButton(tr("export.button"))
        self.export_btn.clicked.connect(self._on_export)
        header.addWidget(self.export_btn, alignment=Qt.AlignTop)
        layout.addLayout(header)

        self.status_label = StatusLabel()
        layout.addWidget(self.status_label)

        self.loading_label = QLabel(tr("app.loading"))
        self.loading_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.loading_label)

        self.metrics_bar = MetricsBar()
        layout.addWidget(self.metrics_bar)

        # Filters
        filters = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText(tr("filter.search"))
        self.search_input.setClearButtonEnabled(True)
        filters.addWidget(self.search_input, stretch=3)

        self.status_filter = self._filter_combo(tr("filter.status"), [s.value for s in Status])
        filters.addWidget(self.status_filter, stretch=1)
        self.priority_filter = self._filter_combo(tr("filter.priority"), [p.value for p in Priority])
        filters.addWidget(self.priority_filter, stretch=1)

        self.add_btn = QPushButton(tr("tasks.add"))
        self.add_btn.clicked.connect(self._on_add)
        filters.addWidget(self.add_btn)
        layout.addLayout(filters)

        # Table on the left, charts + activity on the right
        splitter = QSplitter(Qt.Horizontal)

        self.table = QTableWidget()
        self.table.setColumnCount(len(self.COLUMNS))
        self.table.setHorizontalHeaderLabels([tr(f"tasks.header_{c}") for c in self.COLUMNS])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.Stretch)
        for col in range(1, len(self.COLUMNS)):
            self.table.horizontalHeader().setSectionResizeMode(col, QHeaderView.ResizeToContents)
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.cellDoubleClicked.connect(self._on_row_activated)
        splitter.addWidget(self.table)

        side = QWidget()
        side_layout = QVBoxLayout(side)
        side_layout.setContentsMargins(0, 0, 0, 0)
        self.charts_panel = ChartsPanel()
        side_layout.addWidget(self.charts_panel)
        self.activity_panel = ActivityPanel()
        side_layout.addWidget(self.activity_panel, stretch=1)
        splitter.addWidget(side)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)
        layout.addWidget(splitter, stretch=1)

        self.undo_bar = UndoBar()
        layout.addWidget(self.undo_bar)

    def _filter_combo(self, label: str, values: List[str]) -> QComboBox:
        combo = QComboBox()
        combo.setToolTip(label)
        combo.addItem(f"{label}: {tr('filter.all')}", ALL)
        for value in values:
            combo.addItem(value, value)
        return combo

    def _connect_signals(self):
        self.search_input.textChanged.connect(self.dashboard.set_query)
        self.status_filter.currentIndexChanged.connect(
            lambda _: self.dashboard.set_status_filter(self.status_filter.currentData()))
        self.priority_filter.currentIndexChanged.connect(
            lambda _: self.dashboard.set_priority_filter(self.priority_filter.currentData()))

        self.dashboard.changed.connect(self.refresh)
        self.dashboard.activity_changed.connect(self._refresh_activity)
        self.dashboard.undo_available.connect(self.undo_bar.setVisible)
        self.dashboard.store.loading_changed.connect(self.set_loading)
        self.dashboard.store.error_occurred.connect(self.show_load_error)

        self.undo_bar.undo_requested.connect(self.dashboard.undo_delete)
        self.undo_bar.dismissed.connect(self.dashboard.dismiss_undo)

    # --- Rendering -------------------------------------------------------

    def set_loading(self, loading: bool):
        self.loading_label.setVisible(loading)
        self.table.setEnabled(not loading)
        self.add_btn.setEnabled(not loading)
        self.export_btn.setEnabled(not loading)

    def show_load_error(self, message: str):
        self.status_label.show_message(tr("app.load_error", error=message), is_error=True)

    def refresh(self):
        """Redraw table, metrics and charts from the dashboard"""
        self._visible = self.dashboard.visible_tasks()
        self.metrics_bar.set_metrics(self.dashboard.visible_metrics())
        self.charts_panel.set_data(self.dashboard.chart_data())
        self._refresh_table()

    def _refresh_table(self):
        self.table.setRowCount(len(self._visible))
        for row, task in enumerate(self._visible):
            self.table.setItem(row, 0, QTableWidgetItem(task.title))
            self.table.setItem(row, 1, self._numeric_item(format_currency(task.revenue)))
            self.table.setItem(row, 2, self._numeric_item(format_hours(task.time_taken)))
            self.table.setItem(row, 3, self._numeric_item(f"{task.roi:.1f}"))
            self.table.setItem(row, 4, QTableWidgetItem(task.priority.value))
            self.table.setItem(row, 5, QTableWidgetItem(task.status.value))
            self.table.setCellWidget(row, 6, self._action_buttons(task.id))

    @staticmethod
    def _numeric_item(text: str) -> QTableWidgetItem:
        item = QTableWidgetItem(text)
        item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
        return item

    def _action_buttons(self, task_id: str) -> QWidget:
        cell = QWidget()
        row_layout = QHBoxLayout(cell)
        row_layout.setContentsMargins(2, 0, 2, 0)

        edit_btn = QPushButton(tr("tasks.edit"))
        edit_btn.clicked.connect(lambda: self._on_edit(task_id))
        row_layout.addWidget(edit_btn)

        delete_btn = QPushButton(tr("tasks.delete"))
        delete_btn.clicked.connect(lambda: self.dashboard.delete_task(task_id))
        row_layout.addWidget(delete_btn)
        return cell

    def _refresh_activity(self):
        self.activity_panel.set_items(self.dashboard.activity.items)

    # --- Actions ---------------------------------------------------------

    def _existing_titles(self) -> List[str]:
        return [t.title for t in self.dashboard.store.tasks]

    def _on_add(self):
        dialog = TaskFormDialog(self._existing_titles(), parent=self)
        if dialog.exec():
            self.dashboard.add_task(dialog.get_values())

    def _on_edit(self, task_id: str):
        task = self.dashboard.store.get(task_id)
        if task is None:
            return
        dialog = TaskFormDialog(self._existing_titles(), task=task, parent=self)
        if dialog.exec():
            self.dashboard.update_task(task_id, dialog.get_values())

    def _on_row_activated(self, row: int, _column: int):
        if not 0 <= row < len(self._visible):
            return
        task = self._visible[row]
        dialog = TaskDetailsDialog(task, parent=self)
        if dialog.exec():
            patch = dialog.get_patch()
            if patch:
                self.dashboard.update_task(task.id, patch)

    def _on_export(self):
        path_str, _ = QFileDialog.getSaveFileName(
            self, tr("export.dialog_title"), "tasks.csv", tr("export.filter"))
        if not path_str:
            return
        count = len(self._visible)
        try:
            path = self.dashboard.export_visible(Path(path_str))
        except OSError as e:
            QMessageBox.critical(self, tr("error"), tr("export.error", error=e))
            return
        self.status_label.show_message(tr("export.success", count=count, path=path))

    def closeEvent(self, event):
        self.closed.emit()
        super().closeEvent(event)
