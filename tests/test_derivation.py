"""
Tests for the derived metrics.
"""

import pytest

from taskglitch.domain.models import Metrics, PerformanceGrade, Priority, Status, Task
from taskglitch.services import derivation as d


def _tasks(*pairs, status=Status.TODO):
    return [Task(revenue=r, time_taken=t, status=status) for r, t in pairs]


class TestRoi:

    def test_roi_formula(self):
        assert d.roi(Task(revenue=100, time_taken=10)) == 9.0

    def test_zero_revenue_gives_negative_roi(self):
        assert d.roi(Task(revenue=0, time_taken=4)) == -1.0

    def test_zero_time_falls_back_to_zero(self):
        task = Task.model_construct(revenue=100, time_taken=0)
        assert d.roi(task) == 0.0

    def test_with_derived_keeps_fields(self):
        task = Task(title="Demo", revenue=50, time_taken=5)
        derived = d.with_derived(task)
        assert derived.roi == 9.0
        assert derived.id == task.id
        assert derived.title == "Demo"


class TestAggregates:

    def test_reference_example(self):
        tasks = _tasks((100, 10), (50, 5))
        assert d.total_revenue(tasks) == 150
        assert d.average_roi(tasks) == 9.0

    def test_empty_list_is_all_zero(self):
        assert d.total_revenue([]) == 0
        assert d.total_time_taken([]) == 0
        assert d.average_roi([]) == 0
        assert d.revenue_per_hour([]) == 0
        assert d.time_efficiency_pct([]) == 0

    def test_revenue_per_hour(self):
        assert d.revenue_per_hour(_tasks((100, 10), (50, 5))) == 10.0

    def test_time_efficiency_is_share_of_done_tasks(self):
        tasks = _tasks((10, 1), (10, 1), (10, 1)) + _tasks((10, 1), status=Status.DONE)
        assert d.time_efficiency_pct(tasks) == 25.0

    def test_compute_metrics(self):
        tasks = _tasks((100, 10), status=Status.DONE) + _tasks((50, 5))
        metrics = d.compute_metrics(tasks)

        assert metrics.total_revenue == 150
        assert metrics.total_time_taken == 15
        assert metrics.time_efficiency_pct == 50.0
        assert metrics.revenue_per_hour == 10.0
        assert metrics.average_roi == 9.0
        assert metrics.performance_grade is PerformanceGrade.NEEDS_IMPROVEMENT

    def test_compute_metrics_empty(self):
        assert d.compute_metrics([]) == Metrics()


class TestPerformanceGrade:

    @pytest.mark.parametrize("avg_roi, grade", [
        (-5, PerformanceGrade.NEEDS_IMPROVEMENT),
        (0, PerformanceGrade.NEEDS_IMPROVEMENT),
        (99.99, PerformanceGrade.NEEDS_IMPROVEMENT),
        (100, PerformanceGrade.GOOD),
        (199.5, PerformanceGrade.GOOD),
        (200, PerformanceGrade.EXCELLENT),
        (10_000, PerformanceGrade.EXCELLENT),
    ])
    def test_thresholds(self, avg_roi, grade):
        assert d.performance_grade(avg_roi) is grade

    def test_grade_never_decreases_as_roi_grows(self):
        order = list(PerformanceGrade)
        ranks = [order.index(d.performance_grade(x)) for x in range(-50, 400, 5)]
        assert ranks == sorted(ranks)


class TestBreakdowns:

    def test_revenue_by_priority_has_every_priority(self):
        tasks = [Task(revenue=10, priority=Priority.HIGH), Task(revenue=5, priority=Priority.HIGH)]
        assert d.revenue_by_priority(tasks) == {
            Priority.HIGH: 15.0, Priority.MEDIUM: 0.0, Priority.LOW: 0.0,
        }

    def test_count_by_status(self, sample_tasks):
        assert d.count_by_status(sample_tasks) == {
            Status.TODO: 1, Status.IN_PROGRESS: 1, Status.DONE: 2,
        }
