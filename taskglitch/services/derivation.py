"""
Derivation Engine - pure functions turning raw tasks into metrics.

Every function is total: an empty list yields zeros, never an error.
"""

from typing import Dict, Iterable, List, Sequence

from taskglitch.domain.models import (
    DerivedTask,
    Metrics,
    PerformanceGrade,
    Priority,
    Status,
    Task,
)

# (minimum average ROI, grade), checked from the highest threshold down
GRADE_THRESHOLDS = (
    (200.0, PerformanceGrade.EXCELLENT),
    (100.0, PerformanceGrade.GOOD),
)


def roi(task: Task) -> float:
    """Return on investment: (revenue - time_taken) / time_taken"""
    if task.time_taken <= 0:
        return 0.0
    return (task.revenue - task.time_taken) / task.time_taken


def with_derived(task: Task) -> DerivedTask:
    return DerivedTask(**task.model_dump(), roi=roi(task))


def total_revenue(tasks: Iterable[Task]) -> float:
    return sum(t.revenue for t in tasks)


def total_time_taken(tasks: Iterable[Task]) -> float:
    return sum(t.time_taken for t in tasks)


def time_efficiency_pct(tasks: Sequence[Task]) -> float:
    """
    Share of tasks that are done, as a percentage.

    100 * done / total, or 0 for an empty list.
    """
    if not tasks:
        return 0.0
    done = sum(1 for t in tasks if t.status is Status.DONE)
    return done / len(tasks) * 100


def revenue_per_hour(tasks: Sequence[Task]) -> float:
    hours = total_time_taken(tasks)
    if hours <= 0:
        return 0.0
    return total_revenue(tasks) / hours


def average_roi(tasks: Sequence[Task]) -> float:
    if not tasks:
        return 0.0
    return sum(roi(t) for t in tasks) / len(tasks)


def performance_grade(avg_roi: float) -> PerformanceGrade:
    """Map an average ROI onto a grade; higher ROI never lowers the grade"""
    for threshold, grade in GRADE_THRESHOLDS:
        if avg_roi >= threshold:
            return grade
    return PerformanceGrade.NEEDS_IMPROVEMENT


def compute_metrics(tasks: Sequence[Task]) -> Metrics:
    """All metrics-bar figures for a list of tasks"""
    if not tasks:
        return Metrics()

    avg = average_roi(tasks)
    return Metrics(
        total_revenue=total_revenue(tasks),
        total_time_taken=total_time_taken(tasks),
        time_efficiency_pct=time_efficiency_pct(tasks),
        revenue_per_hour=revenue_per_hour(tasks),
        average_roi=avg,
        performance_grade=performance_grade(avg),
    )


def revenue_by_priority(tasks: Iterable[Task]) -> Dict[Priority, float]:
    """Revenue per priority, with every priority present"""
    totals = {p: 0.0 for p in Priority}
    for t in tasks:
        totals[t.priority] += t.revenue
    return totals


def count_by_status(tasks: Iterable[Task]) -> Dict[Status, int]:
    """Number of tasks per status, with every status present"""
    counts = {s: 0 for s in Status}
    for t in tasks:
        counts[t.status] += 1
    return counts


def derive_all(tasks: Iterable[Task]) -> List[DerivedTask]:
    return [with_derived(t) for t in tasks]
