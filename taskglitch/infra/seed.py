"""
Placeholder dataset used when the initial load yields no tasks.
"""

import random
from datetime import datetime, timedelta
from typing import List, Optional

from taskglitch.domain.models import Priority, Status, Task, new_task_id, utc_now


SALES_ACTIVITIES = [
    "Follow up with lead",
    "Prepare proposal",
    "Product demo",
    "Contract negotiation",
    "Quarterly business review",
    "Cold outreach campaign",
    "Renewal call",
    "Upsell workshop",
    "Pricing review",
    "Partner onboarding",
]

ACCOUNTS = [
    "Acme Corp",
    "Globex",
    "Initech",
    "Umbrella",
    "Stark Industries",
    "Wayne Enterprises",
    "Hooli",
    "Vandelay Imports",
]

NOTES = [
    None,
    "Waiting on legal",
    "Decision maker joins next call",
    "Budget approved",
    "Send recap email",
]


def generate_sales_tasks(count: int = 50, now: Optional[datetime] = None,
                         rng: Optional[random.Random] = None) -> List[Task]:
    """
    Generate a realistic-looking list of sales tasks.

    Args:
        count: Number of tasks to generate
        now: Reference time; tasks are spread over the 60 days before it
        rng: Random generator (pass a seeded one for reproducible data)

    Returns:
        List of valid Task objects with unique ids
    """
    rng = rng or random.Random()
    now = now or utc_now()
    tasks: List[Task] = []

    for _ in range(max(count, 0)):
        created_at = now - timedelta(days=rng.randint(1, 60), hours=rng.randint(0, 23))
        time_taken = rng.randint(1, 12)
        status = rng.choice(list(Status))
        completed_at = created_at + timedelta(hours=time_taken) if status is Status.DONE else None

        tasks.append(Task(
            id=new_task_id(),
            title=f"{rng.choice(SALES_ACTIVITIES)} - {rng.choice(ACCOUNTS)}",
            revenue=rng.randint(1, 100) * 50,
            time_taken=time_taken,
            priority=rng.choice(list(Priority)),
            status=status,
            notes=rng.choice(NOTES),
            created_at=created_at,
            completed_at=completed_at,
        ))

    return tasks
