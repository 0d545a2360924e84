"""
Sample Data Generator for TaskGlitch.
Writes a JSON task collection that can be used as TASKGLITCH_DATA_SOURCE.

Usage:
    python scripts/generate_sample_data.py [output.json] [--count N] [--seed S]
"""

import argparse
import json
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from taskglitch.infra.seed import generate_sales_tasks


def write_sample_data(output: Path, count: int = 50, seed: int = None) -> int:
    """Generate tasks and write them as a JSON array. Returns the task count."""
    rng = random.Random(seed)
    tasks = generate_sales_tasks(count, rng=rng)
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, 'w', encoding='utf-8') as f:
        json.dump([t.to_payload() for t in tasks], f, indent=2)
    return len(tasks)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate a sample task collection")
    parser.add_argument("output", nargs="?", default="tasks.json", type=Path)
    parser.add_argument("--count", type=int, default=50)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    written = write_sample_data(args.output, count=args.count, seed=args.seed)
    print(f"Wrote {written} tasks to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
