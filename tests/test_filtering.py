"""
Tests for sorting and filtering the derived task list.
"""

from datetime import datetime, timezone

import pytest

from taskglitch.domain.models import Task
from taskglitch.services.derivation import derive_all
from taskglitch.services.filtering import ALL, TaskFilter, filter_tasks, sort_tasks


@pytest.fixture
def derived(sample_tasks):
    return sort_tasks(derive_all(sample_tasks))


class TestSortTasks:

    def test_highest_roi_first(self, derived):
        # ROI: c=299, a=9, b=9, d=-1
        assert [t.id for t in derived] == ["c", "a", "b", "d"]

    def test_roi_ties_go_to_the_older_task(self):
        newer = Task(id="new", revenue=100, time_taken=10,
                     created_at=datetime(2026, 5, 2, tzinfo=timezone.utc))
        older = Task(id="old", revenue=50, time_taken=5,
                     created_at=datetime(2026, 5, 1, tzinfo=timezone.utc))
        assert [t.id for t in sort_tasks(derive_all([newer, older]))] == ["old", "new"]

    def test_order_does_not_depend_on_input_order(self, sample_tasks):
        forward = sort_tasks(derive_all(sample_tasks))
        backward = sort_tasks(derive_all(reversed(sample_tasks)))
        assert [t.id for t in forward] == [t.id for t in backward]

    def test_returns_a_new_list(self, derived):
        assert sort_tasks(derived) is not derived


class TestTaskFilter:

    def test_default_filter_returns_everything(self, derived):
        assert TaskFilter().apply(derived) == derived
        assert not TaskFilter().is_active

    def test_query_is_case_insensitive_substring(self, derived):
        result = TaskFilter(query="DEMO").apply(derived)
        assert [t.title for t in result] == ["Product demo"]

    def test_query_is_matched_as_typed(self, derived):
        result = TaskFilter(query="l c").apply(derived)
        assert [t.title for t in result] == ["Renewal call"]
        assert TaskFilter(query=" ").is_active
        assert len(TaskFilter(query=" ").apply(derived)) == 4
        assert TaskFilter(query=" demo ").apply(derived) == []

    def test_status_filter(self, derived):
        result = TaskFilter(status="Done").apply(derived)
        assert [t.id for t in result] == ["a", "d"]

    def test_priority_filter(self, derived):
        result = TaskFilter(priority="Low").apply(derived)
        assert [t.id for t in result] == ["b", "d"]

    def test_dimensions_combine(self, derived):
        result = TaskFilter(query="o", status="Done", priority="Low").apply(derived)
        assert [t.id for t in result] == ["d"]

    def test_all_sentinel_disables_dimension(self, derived):
        assert TaskFilter(status=ALL, priority=ALL).apply(derived) == derived

    def test_unmatched_value_yields_nothing(self, derived):
        assert TaskFilter(status="Archived").apply(derived) == []

    def test_filter_tasks_shortcut_treats_none_as_all(self, derived):
        assert filter_tasks(derived, query="", status=None, priority=None) == derived
        assert [t.id for t in filter_tasks(derived, query="call")] == ["a"]
