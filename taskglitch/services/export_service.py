"""
CSV export of the visible task list.
"""

import csv
import io
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from taskglitch.domain.models import DerivedTask, Task
from taskglitch.services.derivation import roi

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "id", "title", "revenue", "timeTaken", "priority", "status",
    "notes", "createdAt", "completedAt", "roi",
]


def _format_timestamp(value: Optional[datetime]) -> str:
    return value.isoformat() if value else ""


def _format_number(value: float) -> str:
    # 1500.0 -> "1500", 2.5 -> "2.5"
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def to_csv(tasks: Iterable[Task]) -> str:
    """
    Render tasks as CSV, one row per task in the given order.

    Column names match the camelCase fields of the JSON source.
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator='\n')
    writer.writerow(CSV_COLUMNS)

    for t in tasks:
        task_roi = t.roi if isinstance(t, DerivedTask) else roi(t)
        writer.writerow([
            t.id,
            t.title,
            _format_number(t.revenue),
            _format_number(t.time_taken),
            t.priority.value,
            t.status.value,
            t.notes or "",
            _format_timestamp(t.created_at),
            _format_timestamp(t.completed_at),
            f"{task_roi:.2f}",
        ])

    return output.getvalue()


def export_csv(path: Path, tasks: Iterable[Task]) -> Path:
    """Write tasks as CSV to path, creating parent directories"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = to_csv(tasks)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
    logger.info(f"Exported tasks to {path}")
    return path
