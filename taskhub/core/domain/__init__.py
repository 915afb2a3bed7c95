# taskhub/core/domain/__init__.py
"""
Domain Entities and Value Objects.

This package defines the core data structures used throughout the application:
the User and Task aggregates, the identifier and email value objects, and the
closed DomainError taxonomy. Nothing here knows about HTTP or SQL.
"""

from .exceptions import (
    AlreadyExistsError,
    DomainError,
    ErrorKind,
    InfrastructureError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
)
from .models import Entity, Task, User
from .value_objects import Email, EntityId, TaskId, UserId

__all__ = [
    "AlreadyExistsError",
    "DomainError",
    "Email",
    "Entity",
    "EntityId",
    "ErrorKind",
    "InfrastructureError",
    "NotFoundError",
    "Task",
    "TaskId",
    "UnexpectedError",
    "User",
    "UserId",
    "ValidationError",
]
