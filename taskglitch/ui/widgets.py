"""
Dashboard building blocks: metrics bar, undo bar, charts and activity panels.
"""

from typing import Dict, List

from PySide6.QtWidgets import (
    QFrame, QGridLayout, QGroupBox, QHBoxLayout, QLabel, QListWidget,
    QListWidgetItem, QProgressBar, QPushButton, QVBoxLayout
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont

from taskglitch.domain.models import Metrics
from taskglitch.i18n import tr
from taskglitch.services.activity_log import ActivityItem
from taskglitch.utils import format_currency


class MetricsBar(QFrame):
    """Row of headline figures for the visible tasks"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.StyledPanel)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)

        self._values: Dict[str, QLabel] = {}
        for key in ("total_revenue", "time_efficiency", "revenue_per_hour", "average_roi", "grade"):
            box = QVBoxLayout()
            caption = QLabel(tr(f"metrics.{key}"))
            caption.setAlignment(Qt.AlignCenter)
            value = QLabel("-")
            value.setAlignment(Qt.AlignCenter)
            font = QFont()
            font.setPointSize(14)
            font.setBold(True)
            value.setFont(font)
            box.addWidget(caption)
            box.addWidget(value)
            layout.addLayout(box)
            self._values[key] = value

    def set_metrics(self, metrics: Metrics):
        self._values["total_revenue"].setText(format_currency(metrics.total_revenue))
        self._values["time_efficiency"].setText(f"{metrics.time_efficiency_pct:.1f}%")
        self._values["revenue_per_hour"].setText(format_currency(metrics.revenue_per_hour))
        self._values["average_roi"].setText(f"{metrics.average_roi:.1f}")
        self._values["grade"].setText(metrics.performance_grade.value)


class UndoBar(QFrame):
    """
    Shown after a delete; offers to restore the task or dismiss the offer.
    """

    undo_requested = Signal()
    dismissed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.StyledPanel)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 4, 12, 4)

        self.message = QLabel(tr("undo.message"))
        layout.addWidget(self.message, stretch=1)

        undo_btn = QPushButton(tr("undo.undo"))
        undo_btn.clicked.connect(self.undo_requested.emit)
        layout.addWidget(undo_btn)

        dismiss_btn = QPushButton(tr("undo.dismiss"))
        dismiss_btn.clicked.connect(self.dismissed.emit)
        layout.addWidget(dismiss_btn)

        self.hide()


class ChartsPanel(QGroupBox):
    """
    Horizontal bars for revenue by priority and task count by status.
    """

    def __init__(self, parent=None):
        super().__init__(tr("charts.title"), parent)
        self.grid = QGridLayout(self)
        self._bars: Dict[str, Dict[str, QProgressBar]] = {}

    def set_data(self, data: Dict[str, Dict[str, float]]):
        # Rebuild only when the set of series/labels changes
        shape = {name: list(series) for name, series in data.items()}
        if shape != {name: list(bars) for name, bars in self._bars.items()}:
            self._rebuild(shape)

        for name, series in data.items():
            peak = max(series.values(), default=0.0)
            for label, value in series.items():
                bar = self._bars[name][label]
                bar.setValue(int(round(value / peak * 100)) if peak > 0 else 0)
                if name == "revenue_by_priority":
                    bar.setFormat(format_currency(value))
                else:
                    bar.setFormat(f"{int(value)}")

    def _rebuild(self, shape: Dict[str, List[str]]):
        while self.grid.count():
            item = self.grid.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self._bars = {}

        row = 0
        for name, labels in shape.items():
            self.grid.addWidget(QLabel(f"<b>{tr('charts.' + name)}</b>"), row, 0, 1, 2)
            row += 1
            self._bars[name] = {}
            for label in labels:
                self.grid.addWidget(QLabel(label), row, 0)
                bar = QProgressBar()
                bar.setRange(0, 100)
                bar.setTextVisible(True)
                self.grid.addWidget(bar, row, 1)
                self._bars[name][label] = bar
                row += 1


class ActivityPanel(QGroupBox):
    """Most recent actions first"""

    def __init__(self, parent=None):
        super().__init__(tr("activity.title"), parent)
        layout = QVBoxLayout(self)
        self.list = QListWidget()
        layout.addWidget(self.list)
        self.set_items([])

    def set_items(self, items: List[ActivityItem]):
        self.list.clear()
        if not items:
            placeholder = QListWidgetItem(tr("activity.empty"))
            placeholder.setFlags(Qt.NoItemFlags)
            self.list.addItem(placeholder)
            return
        for item in items:
            local_ts = item.ts.astimezone().strftime("%H:%M:%S")
            self.list.addItem(f"{local_ts}  {item.summary}")


class StatusLabel(QLabel):
    """One-line message area for load errors and export results"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWordWrap(True)
        self.hide()

    def show_message(self, text: str, is_error: bool = False):
        color = "#c62828" if is_error else "#2e7d32"
        self.setStyleSheet(f"color: {color};")
        self.setText(text)
        self.show()


__all__ = ["MetricsBar", "UndoBar", "ChartsPanel", "ActivityPanel", "StatusLabel"]
