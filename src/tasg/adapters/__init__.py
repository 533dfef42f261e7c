"""Storage adapters implementing the repository interfaces."""

from .json_store import JsonTaskRepository

__all__ = ["JsonTaskRepository"]
