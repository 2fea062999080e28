"""Data loading utilities."""

from .exercise_loader import load_seed_exercises, merge_seed_library

__all__ = ["load_seed_exercises", "merge_seed_library"]
