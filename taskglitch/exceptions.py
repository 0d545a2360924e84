"""
Exception hierarchy for TaskGlitch.

Only loading the initial task collection can fail in a way the user needs to
hear about; everything else degrades to a no-op or a safe default.
"""


class TaskGlitchError(Exception):
    """Base exception for the application"""


class TaskSourceError(TaskGlitchError):
    """The initial task collection could not be read or parsed"""

    def __init__(self, location: str, original_error: Exception) -> None:
        """
        Args:
            location: File path or URL that was being loaded
            original_error: The underlying I/O, HTTP or decoding error
        """
        super().__init__(f"Failed to load tasks from {location}: {original_error}")
        self.location = location
        self.original_error = original_error
