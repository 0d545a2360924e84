"""
Test doubles shared across test modules.
"""

import asyncio
from typing import List, Optional

from taskglitch.domain.models import Task


class FakeTaskSource:
    """
    Stands in for TaskSource; counts how often the collection is fetched.
    """

    def __init__(self, tasks: Optional[List[Task]] = None, error: Optional[Exception] = None,
                 delay: float = 0.0):
        self.location = "memory://tasks"
        self.tasks = tasks or []
        self.error = error
        self.delay = delay
        self.calls = 0

    async def load(self, now=None) -> List[Task]:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return list(self.tasks)
