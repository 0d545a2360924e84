import sys
from pathlib import Path

def get_resource_path(relative_path: str) -> Path:
    """
    Get absolute path to resource, works for dev and for PyInstaller.

    Args:
        relative_path: Relative path from project root (e.g., "taskglitch/resources/tasks.json")

    Returns:
        Absolute Path object
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller creates a temp folder and stores path in _MEIPASS
        base_path = Path(sys._MEIPASS)
    else:
        # This file is in taskglitch/utils.py, so project root is up two levels
        base_path = Path(__file__).parent.parent.absolute()

    return base_path / relative_path


def format_currency(amount: float) -> str:
    """Format a revenue figure for display, e.g. 1234.5 -> '$1,234.50'"""
    return f"${amount:,.2f}"


def format_hours(hours: float) -> str:
    """Format hours with at most one decimal, e.g. 3.0 -> '3h', 2.5 -> '2.5h'"""
    if float(hours).is_integer():
        return f"{int(hours)}h"
    return f"{hours:.1f}h"
