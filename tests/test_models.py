"""
Tests for the Task model's coercion rules.

Records from JSON sources are never rejected for bad numbers or unknown enum
values; they are coerced to safe defaults.
"""

from datetime import datetime, timezone

import pytest

from taskglitch.domain.models import Priority, Status, Task


class TestTimeTaken:

    @pytest.mark.parametrize("raw", [0, -3, "abc", None, "", float("nan"), [], True])
    def test_invalid_or_non_positive_becomes_one(self, raw):
        assert Task(timeTaken=raw).time_taken == 1.0

    @pytest.mark.parametrize("raw, expected", [(10, 10.0), ("4", 4.0), (2.5, 2.5)])
    def test_valid_values_are_kept(self, raw, expected):
        assert Task(timeTaken=raw).time_taken == expected

    def test_fractions_below_one_are_raised_to_one(self):
        assert Task(time_taken=0.25).time_taken == 1.0

    def test_assignment_is_coerced_too(self):
        task = Task(time_taken=5)
        task.time_taken = -1
        assert task.time_taken == 1.0


class TestRevenue:

    @pytest.mark.parametrize("raw", ["n/a", None, -50, float("inf")])
    def test_invalid_or_negative_becomes_zero(self, raw):
        assert Task(revenue=raw).revenue == 0.0

    def test_numeric_string_is_parsed(self):
        assert Task(revenue="1800").revenue == 1800.0


def test_integers_too_large_for_float_fall_back_to_defaults():
    task = Task(revenue=10 ** 400, time_taken=10 ** 400)
    assert task.revenue == 0.0
    assert task.time_taken == 1.0


class TestEnumsAndDefaults:

    def test_unknown_priority_and_status_fall_back(self):
        task = Task(priority="Urgent", status="Blocked")
        assert task.priority is Priority.MEDIUM
        assert task.status is Status.TODO

    def test_enum_lookup_ignores_case(self):
        task = Task(priority="high", status=" in progress ")
        assert task.priority is Priority.HIGH
        assert task.status is Status.IN_PROGRESS

    def test_missing_id_and_title_are_filled(self):
        task = Task(id="", title="  ")
        assert task.id
        assert task.title == "Untitled Task"

    def test_generated_ids_are_unique(self):
        assert len({Task().id for _ in range(100)}) == 100


class TestTimestamps:

    def test_naive_timestamp_is_treated_as_utc(self):
        task = Task(createdAt="2026-03-01T10:00:00")
        assert task.created_at == datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)

    def test_blank_completed_at_is_none(self):
        assert Task(completedAt="").completed_at is None


def test_payload_uses_camel_case_names():
    task = Task(id="x", title="Demo", revenue=10, time_taken=2,
                created_at=datetime(2026, 1, 1, tzinfo=timezone.utc))
    payload = task.to_payload()

    assert payload["timeTaken"] == 2.0
    assert payload["createdAt"].startswith("2026-01-01T00:00:00")
    assert payload["completedAt"] is None
    assert payload["priority"] == "Medium"
    assert Task.model_validate(payload) == task
