"""
Pytest configuration and fixtures.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List

import pytest
from PySide6.QtCore import QCoreApplication

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from taskglitch.domain.models import Priority, Status, Task
from taskglitch.services.task_store import TaskStore
from .fakes import FakeTaskSource


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    """Signals are delivered inside a Qt application instance"""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def sample_tasks() -> List[Task]:
    """Four tasks with distinct ROI, status and priority"""
    return [
        Task(id="a", title="Renewal call", revenue=100, time_taken=10,
             priority=Priority.HIGH, status=Status.DONE,
             created_at=datetime(2026, 1, 1, tzinfo=timezone.utc)),
        Task(id="b", title="Product demo", revenue=50, time_taken=5,
             priority=Priority.LOW, status=Status.TODO,
             created_at=datetime(2026, 1, 2, tzinfo=timezone.utc)),
        Task(id="c", title="Prepare proposal", revenue=900, time_taken=3,
             priority=Priority.MEDIUM, status=Status.IN_PROGRESS,
             created_at=datetime(2026, 1, 3, tzinfo=timezone.utc)),
        Task(id="d", title="Cold outreach", revenue=0, time_taken=4,
             priority=Priority.LOW, status=Status.DONE,
             created_at=datetime(2026, 1, 4, tzinfo=timezone.utc)),
    ]


@pytest.fixture
def fake_source(sample_tasks) -> FakeTaskSource:
    return FakeTaskSource(tasks=sample_tasks)


@pytest.fixture
def store(fake_source) -> TaskStore:
    """Store over the sample tasks; call ``await store.load()`` to fill it"""
    return TaskStore(fake_source, seed_count=5)


@pytest.fixture
def empty_store() -> TaskStore:
    """Store that has not loaded anything"""
    return TaskStore(FakeTaskSource(), seed_count=5)
