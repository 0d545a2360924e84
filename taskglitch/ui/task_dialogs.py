import html
from typing import Any, Dict, Iterable, Optional

from PySide6.QtWidgets import (
    QComboBox, QDialog, QDialogButtonBox, QDoubleSpinBox, QFormLayout,
    QLabel, QLineEdit, QTextEdit, QVBoxLayout
)

from taskglitch.domain.models import DerivedTask, Priority, Status, Task
from taskglitch.i18n import tr
from taskglitch.utils import format_currency, format_hours


def validate_title(title: str, existing_titles: Iterable[str],
                   current_title: Optional[str] = None) -> Optional[str]:
    """
    Check a task title from the form.

    Returns the translation key of the problem, or None if the title is
    acceptable. Titles are compared case-insensitively; the task being
    edited may keep its own title.
    """
    cleaned = title.strip()
    if not cleaned:
        return "form.error_title_required"

    taken = {t.strip().lower() for t in existing_titles}
    if current_title is not None:
        taken.discard(current_title.strip().lower())
    if cleaned.lower() in taken:
        return "form.error_title_duplicate"
    return None


def title_markup(title: str) -> str:
    """Bold rich-text label for a user-entered title"""
    return f"<b>{html.escape(title)}</b>"


class TaskFormDialog(QDialog):
    """
    Add or edit a task. Pass ``task`` to edit, omit it to add.
    """
    def __init__(self, existing_titles: Iterable[str], task: Optional[Task] = None, parent=None):
        super().__init__(parent)
        self.task = task
        self.existing_titles = list(existing_titles)
        self.setWindowTitle(tr("form.edit_title") if task else tr("form.add_title"))
        self.setMinimumWidth(420)

        self._setup_ui()
        if task:
            self._fill(task)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.title_input = QLineEdit()
        form.addRow(tr("form.title"), self.title_input)

        self.revenue_input = QDoubleSpinBox()
        self.revenue_input.setRange(0, 1_000_000_000)
        self.revenue_input.setDecimals(2)
        form.addRow(tr("form.revenue"), self.revenue_input)

        self.time_input = QDoubleSpinBox()
        self.time_input.setRange(1, 10_000)
        self.time_input.setDecimals(1)
        self.time_input.setValue(1)
        form.addRow(tr("form.time_taken"), self.time_input)

        self.priority_combo = QComboBox()
        for p in Priority:
            self.priority_combo.addItem(p.value, p.value)
        self.priority_combo.setCurrentText(Priority.MEDIUM.value)
        form.addRow(tr("form.priority"), self.priority_combo)

        self.status_combo = QComboBox()
        for s in Status:
            self.status_combo.addItem(s.value, s.value)
        form.addRow(tr("form.status"), self.status_combo)

        self.notes_input = QTextEdit()
        self.notes_input.setFixedHeight(80)
        form.addRow(tr("form.notes"), self.notes_input)

        layout.addLayout(form)

        self.error_label = QLabel()
        self.error_label.setStyleSheet("color: #c62828;")
        self.error_label.hide()
        layout.addWidget(self.error_label)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _fill(self, task: Task):
        self.title_input.setText(task.title)
        self.revenue_input.setValue(task.revenue)
        self.time_input.setValue(task.time_taken)
        self.priority_combo.setCurrentText(task.priority.value)
        self.status_combo.setCurrentText(task.status.value)
        self.notes_input.setPlainText(task.notes or "")

    def _on_accept(self):
        problem = validate_title(
            self.title_input.text(),
            self.existing_titles,
            current_title=self.task.title if self.task else None,
        )
        if problem:
            self.error_label.setText(tr(problem))
            self.error_label.show()
            return
        self.accept()

    def get_values(self) -> Dict[str, Any]:
        """Form contents as a task payload/patch"""
        notes = self.notes_input.toPlainText().strip()
        return {
            "title": self.title_input.text().strip(),
            "revenue": self.revenue_input.value(),
            "time_taken": self.time_input.value(),
            "priority": self.priority_combo.currentData(),
            "status": self.status_combo.currentData(),
            "notes": notes or None,
        }


class TaskDetailsDialog(QDialog):
    """
    Read-only summary of a task with editable status and notes.
    """
    def __init__(self, task: DerivedTask, parent=None):
        super().__init__(parent)
        self.task = task
        self.setWindowTitle(tr("details.title"))
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)
        form = QFormLayout()

        form.addRow(tr("form.title"), QLabel(title_markup(task.title)))
        form.addRow(tr("form.revenue"), QLabel(format_currency(task.revenue)))
        form.addRow(tr("form.time_taken"), QLabel(format_hours(task.time_taken)))
        form.addRow(tr("details.roi"), QLabel(f"{task.roi:.1f}"))
        form.addRow(tr("form.priority"), QLabel(task.priority.value))
        form.addRow(tr("details.created"), QLabel(task.created_at.astimezone().strftime("%Y-%m-%d %H:%M")))
        if task.completed_at:
            form.addRow(tr("details.completed"),
                        QLabel(task.completed_at.astimezone().strftime("%Y-%m-%d %H:%M")))

        self.status_combo = QComboBox()
        for s in Status:
            self.status_combo.addItem(s.value, s.value)
        self.status_combo.setCurrentText(task.status.value)
        form.addRow(tr("form.status"), self.status_combo)

        self.notes_input = QTextEdit()
        self.notes_input.setPlainText(task.notes or "")
        self.notes_input.setFixedHeight(100)
        form.addRow(tr("form.notes"), self.notes_input)

        layout.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def get_patch(self) -> Dict[str, Any]:
        """Only the fields that changed"""
        patch: Dict[str, Any] = {}
        status = self.status_combo.currentData()
        if status != self.task.status.value:
            patch["status"] = status
        notes = self.notes_input.toPlainText().strip() or None
        if notes != self.task.notes:
            patch["notes"] = notes
        return patch
