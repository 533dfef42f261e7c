"""Repository interfaces for tasg.

Implementations live in ``tasg.adapters``.
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
