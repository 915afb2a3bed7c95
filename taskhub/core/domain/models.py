# taskhub/core/domain/models.py
from datetime import datetime
from typing import Optional

from taskhub.core.domain.exceptions import ValidationError
from taskhub.core.domain.value_objects import Email, EntityId, TaskId, UserId

# --- Base ---

class Entity:
    """
    An object with identity. Two entities are equal when they are of the same
    type and share an id, regardless of their other fields.
    """

    _id: EntityId

    @property
    def id(self) -> EntityId:
        return self._id

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

# --- Aggregates ---

class User(Entity):
    """
    User aggregate root.

    Invariants: ``name`` is never empty and ``email`` is always a valid Email.
    ``updated_at`` is an audit field written by the store and never exposed.
    """

    _id: UserId

    def __init__(self, id: UserId, name: str, email: str):
        self._id = id
        self._name, self._email = self._validated(name, email)
        self._updated_at: Optional[datetime] = None

    @classmethod
    def reconstitute(
        cls,
        id: UserId,
        name: str,
        email: Email,
        updated_at: Optional[datetime] = None,
    ) -> "User":
        """
        Rebuilds a user from a stored row without checking invariants.
        Only the persistence adapter calls this; the row was validated on write.
        """
        user = cls.__new__(cls)
        user._id = id
        user._name = name
        user._email = email
        user._updated_at = updated_at
        return user

    @property
    def id(self) -> UserId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> Email:
        return self._email

    def update(self, name: str, email: str) -> None:
        """Replaces name and email together; on failure neither changes."""
        self._name, self._email = self._validated(name, email)

    @staticmethod
    def _validated(name: str, email: str) -> tuple[str, Email]:
        if not name:
            raise ValidationError("Name cannot be empty")
        return name, Email(email)

    def __repr__(self) -> str:
        return f"<User id={self._id.value!r} email={self._email.value!r}>"


class Task(Entity):
    """
    Task aggregate root, owned by a user through ``user_id``.

    Invariants: ``title`` is never empty; ``completed`` only moves from
    False to True.
    """

    _id: TaskId

    def __init__(self, id: TaskId, user_id: UserId, title: str, description: str = ""):
        if not title:
            raise ValidationError("Title cannot be empty")
        self._id = id
        self._user_id = user_id
        self._title = title
        self._description = description
        self._completed = False
        self._updated_at: Optional[datetime] = None

    @classmethod
    def reconstitute(
        cls,
        id: TaskId,
        user_id: UserId,
        title: str,
        description: str,
        completed: bool,
        updated_at: Optional[datetime] = None,
    ) -> "Task":
        """Rebuilds a task from a stored row without checking invariants."""
        task = cls.__new__(cls)
        task._id = id
        task._user_id = user_id
        task._title = title
        task._description = description
        task._completed = completed
        task._updated_at = updated_at
        return task

    @property
    def id(self) -> TaskId:
        return self._id

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    def is_completed(self) -> bool:
        return self._completed

    def complete(self) -> None:
        """
        Marks the task as completed.

        Raises:
            ValidationError: if the task is already completed.
        """
        if self._completed:
            raise ValidationError("Task is already completed")
        self._completed = True

    def __repr__(self) -> str:
        return f"<Task id={self._id.value!r} user_id={self._user_id.value!r} completed={self._completed}>"
