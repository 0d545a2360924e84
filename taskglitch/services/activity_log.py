"""
Activity Log - recent user actions, newest first.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from taskglitch.domain.models import utc_now


class ActivityType(str, Enum):
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"
    UNDO = "undo"


class ActivityItem(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    ts: datetime = Field(default_factory=utc_now)
    type: ActivityType
    summary: str


class ActivityLog:
    """
    Bounded list of activity items. When full, the oldest entries drop off.
    """

    def __init__(self, limit: int = 50):
        self.limit = limit
        self._items: List[ActivityItem] = []

    @property
    def items(self) -> List[ActivityItem]:
        return list(self._items)

    def record(self, activity_type: ActivityType, summary: str) -> ActivityItem:
        item = ActivityItem(type=activity_type, summary=summary)
        self._items = [item, *self._items][:self.limit]
        return item

    def clear(self) -> None:
        self._items = []

    def __len__(self) -> int:
        return len(self._items)
