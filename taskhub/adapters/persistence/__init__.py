# taskhub/adapters/persistence/__init__.py
"""
SQL persistence adapter (SQLAlchemy 2.0, async).

Implements the repository ports against PostgreSQL (asyncpg) or SQLite
(aiosqlite) and translates every storage failure into a DomainError.
"""

from .database import create_engine, create_schema, create_session_factory, ping
from .task_repo import SqlAlchemyTaskRepository
from .user_repo import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyTaskRepository",
    "SqlAlchemyUserRepository",
    "create_engine",
    "create_schema",
    "create_session_factory",
    "ping",
]
