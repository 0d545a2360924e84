"""
Tests for CSV export.
"""

import csv
import io
from datetime import datetime, timezone

from taskglitch.domain.models import Task
from taskglitch.services.derivation import derive_all
from taskglitch.services.export_service import CSV_COLUMNS, export_csv, to_csv


def _rows(text: str):
    return list(csv.reader(io.StringIO(text)))


def test_header_only_for_empty_list():
    assert _rows(to_csv([])) == [CSV_COLUMNS]


def test_row_contents():
    task = Task(id="t1", title="Demo", revenue=1500, time_taken=2.5, priority="High",
                status="Done", created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
                completed_at=datetime(2026, 1, 2, tzinfo=timezone.utc))

    header, row = _rows(to_csv(derive_all([task])))

    assert dict(zip(header, row)) == {
        "id": "t1",
        "title": "Demo",
        "revenue": "1500",
        "timeTaken": "2.5",
        "priority": "High",
        "status": "Done",
        "notes": "",
        "createdAt": "2026-01-01T00:00:00+00:00",
        "completedAt": "2026-01-02T00:00:00+00:00",
        "roi": "599.00",
    }


def test_commas_quotes_and_newlines_survive():
    title = 'Call "Big" client, then follow up'
    notes = "line one\nline two"
    text = to_csv(derive_all([Task(title=title, notes=notes)]))

    row = _rows(text)[1]
    assert row[1] == title
    assert row[6] == notes


def test_plain_tasks_get_roi_computed():
    row = _rows(to_csv([Task(revenue=100, time_taken=10)]))[1]
    assert row[-1] == "9.00"


def test_export_csv_writes_file(tmp_path):
    path = export_csv(tmp_path / "nested" / "tasks.csv", derive_all([Task(title="A"), Task(title="B")]))

    assert path.exists()
    assert len(_rows(path.read_text(encoding="utf-8"))) == 3
