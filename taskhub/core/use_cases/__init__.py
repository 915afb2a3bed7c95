# taskhub/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

This package contains the "Interactors" of the system. Each use case is one
business action on one aggregate (e.g. "Create Task", "Complete Task") and:
1. Parses raw identifiers into value objects.
2. Builds or mutates the aggregate, which enforces its invariants.
3. Reads and writes through a repository Port.

DomainErrors pass through unchanged; use cases never retry.
"""

from .complete_task import CompleteTask
from .create_task import CreateTask, CreateTaskCommand
from .create_user import CreateUser, CreateUserCommand
from .delete_task import DeleteTask
from .delete_user import DeleteUser
from .get_task import GetTask, ListTasks
from .get_user import GetUser, ListUsers
from .update_user import UpdateUser, UpdateUserCommand

__all__ = [
    "CompleteTask",
    "CreateTask",
    "CreateTaskCommand",
    "CreateUser",
    "CreateUserCommand",
    "DeleteTask",
    "DeleteUser",
    "GetTask",
    "GetUser",
    "ListTasks",
    "ListUsers",
    "UpdateUser",
    "UpdateUserCommand",
]
