"""
Task Source - reads the initial task collection.

The collection is a JSON array of task-like objects stored either in a local
file or behind an http(s) URL. Records are often incomplete, so everything
passes through normalize_tasks() before it reaches the store.
"""

import json
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from taskglitch.domain.models import Task, new_task_id, utc_now
from taskglitch.exceptions import TaskSourceError

logger = logging.getLogger(__name__)

_SNAKE_ALIASES = {
    "created_at": "createdAt",
    "completed_at": "completedAt",
    "time_taken": "timeTaken",
}


def normalize_tasks(raw: Any, now: Optional[datetime] = None) -> List[Task]:
    """
    Turn raw JSON records into valid Task objects.

    - Anything other than a list yields an empty result
    - Non-object entries are skipped
    - Numbers and enums are coerced by the Task model (revenue -> 0, timeTaken -> 1)
    - Missing createdAt becomes ``now - (index + 1) days``
    - Missing or duplicate ids are replaced with fresh ones

    Args:
        raw: Decoded JSON document
        now: Reference time for defaulted timestamps (defaults to current UTC time)
    """
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning(f"Task collection is a {type(raw).__name__}, expected a list")
        return []

    now = now or utc_now()
    tasks: List[Task] = []
    seen_ids = set()

    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            logger.debug(f"Skipping non-object task record at index {idx}")
            continue

        data = dict(item)
        for snake, camel in _SNAKE_ALIASES.items():
            if snake in data:
                data.setdefault(camel, data.pop(snake))

        fallback_created = now - timedelta(days=idx + 1)
        if not data.get("createdAt"):
            data["createdAt"] = fallback_created

        try:
            task = Task.model_validate(data)
        except ValidationError as e:
            # Only timestamps can fail validation; everything else is coerced
            logger.warning(f"Unreadable timestamps in task record {idx}: {e.error_count()} error(s)")
            data["createdAt"] = fallback_created
            data["completedAt"] = None
            task = Task.model_validate(data)

        if task.id in seen_ids:
            logger.debug(f"Duplicate task id {task.id!r} at index {idx}, assigning a new one")
            task = task.model_copy(update={"id": new_task_id()})
        seen_ids.add(task.id)
        tasks.append(task)

    return tasks


class TaskSource:
    """
    Reads the raw task collection from a file path or an http(s) URL.
    """

    def __init__(self, location: str, timeout: float = 10.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            location: File path or URL of the JSON task collection
            timeout: HTTP timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.location = str(location)
        self.timeout = timeout
        self.transport = transport

    @property
    def is_remote(self) -> bool:
        return self.location.startswith(("http://", "https://"))

    async def fetch(self) -> Any:
        """
        Fetch and decode the JSON document.

        Raises:
            TaskSourceError: If the document cannot be read or decoded
        """
        if self.is_remote:
            return await self._fetch_remote()
        return self._read_file()

    async def load(self, now: Optional[datetime] = None) -> List[Task]:
        """Fetch the collection and normalize it into tasks"""
        raw = await self.fetch()
        tasks = normalize_tasks(raw, now=now)
        logger.info(f"Loaded {len(tasks)} task(s) from {self.location}")
        return tasks

    async def _fetch_remote(self) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.location)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise TaskSourceError(self.location, e) from e

    def _read_file(self) -> Any:
        try:
            with open(Path(self.location), 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise TaskSourceError(self.location, e) from e
