# taskhub/core/ports/task_repository.py
from typing import List, Optional, Protocol

from taskhub.core.domain.models import Task
from taskhub.core.domain.value_objects import TaskId, UserId


class ITaskRepository(Protocol):
    """
    Port for persisting Task aggregates.
    Implementations may be backed by any store that enforces the foreign key
    from tasks to users.
    """

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        ...

    async def find_by_user_id(self, user_id: UserId) -> List[Task]:
        """Returns every task owned by ``user_id`` (empty if none or unknown user)."""
        ...

    async def find_all(self) -> List[Task]:
        ...

    async def insert(self, task: Task) -> None:
        """
        Persists a new task. Constraints are checked by the store at write time.

        Raises:
            AlreadyExistsError: the task id is already taken.
            NotFoundError: ``task.user_id`` does not reference an existing user.
        """
        ...

    async def update(self, task: Task) -> None:
        """Writes title, description and completion state of an existing task."""
        ...

    async def delete(self, task_id: TaskId) -> bool:
        """Returns True if a row existed and was removed."""
        ...
