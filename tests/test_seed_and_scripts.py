"""
Tests for the placeholder dataset and the sample data script.
"""

import json
import random
import sys
from datetime import datetime, timezone
from pathlib import Path

from taskglitch.domain.models import Status
from taskglitch.infra.seed import generate_sales_tasks
from taskglitch.infra.task_source import normalize_tasks

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from generate_sample_data import main as generate_main  # noqa: E402


NOW = datetime(2026, 10, 1, tzinfo=timezone.utc)


def test_generates_requested_count_with_unique_ids():
    tasks = generate_sales_tasks(50, now=NOW)
    assert len(tasks) == 50
    assert len({t.id for t in tasks}) == 50


def test_generated_tasks_are_valid():
    for task in generate_sales_tasks(30, now=NOW, rng=random.Random(7)):
        assert task.time_taken >= 1
        assert task.revenue >= 0
        assert task.created_at < NOW
        assert (task.completed_at is not None) == (task.status is Status.DONE)


def test_seeded_generator_is_reproducible():
    first = generate_sales_tasks(10, now=NOW, rng=random.Random(42))
    second = generate_sales_tasks(10, now=NOW, rng=random.Random(42))
    assert [t.title for t in first] == [t.title for t in second]
    assert [t.revenue for t in first] == [t.revenue for t in second]


def test_zero_or_negative_count_gives_empty_list():
    assert generate_sales_tasks(0) == []
    assert generate_sales_tasks(-3) == []


def test_script_writes_loadable_collection(tmp_path, capsys):
    output = tmp_path / "tasks.json"

    assert generate_main([str(output), "--count", "6", "--seed", "1"]) == 0

    raw = json.loads(output.read_text(encoding="utf-8"))
    assert len(raw) == 6
    assert "timeTaken" in raw[0]
    assert len(normalize_tasks(raw)) == 6
    assert "Wrote 6 tasks" in capsys.readouterr().out
