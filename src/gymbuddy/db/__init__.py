"""Database layer for gymbuddy."""

from .engine import STORAGE_KEY, get_db_path, init_db
from .gateway import StateGateway

__all__ = [
    "get_db_path",
    "init_db",
    "StateGateway",
    "STORAGE_KEY",
]
