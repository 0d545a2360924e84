#!/usr/bin/env python

"""
TaskGlitch - Main Entry Point

A desktop dashboard for tasks with revenue and time spent: ROI, efficiency,
revenue per hour, performance grade, charts, activity log and CSV export.

Usage:
    python main.py

Configuration:
    TASKGLITCH_DATA_SOURCE=<file or URL>  initial task collection
    TASKGLITCH_LOG_LEVEL=DEBUG            more verbose logging
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from taskglitch.infra.config import get_settings
from taskglitch.logging_setup import setup_logging
from taskglitch.ui import DashboardApp


def main():
    """Main entry point"""
    settings = get_settings()
    setup_logging(settings.log_level)
    app = DashboardApp(settings)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
