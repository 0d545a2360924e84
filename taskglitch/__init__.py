"""TaskGlitch - task revenue and time tracking dashboard"""

__version__ = "1.0.0"
