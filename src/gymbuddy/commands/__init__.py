"""CLI commands for gymbuddy."""

from .exercises import exercises
from .history import history
from .init import init
from .play import play
from .routines import routines

__all__ = [
    "exercises",
    "history",
    "init",
    "play",
    "routines",
]
