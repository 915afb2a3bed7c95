# taskhub/core/ports/__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the persistence adapters must
implement. They let the use cases talk to storage without knowing whether it
is PostgreSQL, SQLite or a test double.
"""

from .task_repository import ITaskRepository
from .user_repository import IUserRepository

__all__ = [
    "ITaskRepository",
    "IUserRepository",
]
