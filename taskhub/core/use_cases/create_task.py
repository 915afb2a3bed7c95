# taskhub/core/use_cases/create_task.py
from dataclasses import dataclass

import structlog

from taskhub.core.domain.models import Task
from taskhub.core.domain.value_objects import TaskId, UserId
from taskhub.core.ports.task_repository import ITaskRepository
from taskhub.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class CreateTaskCommand:
    user_id: str
    title: str
    description: str = ""


class CreateTask:
    """
    Use Case: Creates a task for a user.

    The owning user is not looked up first. The foreign key from tasks to
    users is enforced by the store, and the persistence adapter reports a
    missing user as NotFoundError when the insert is rejected.
    """

    def __init__(self, repository: ITaskRepository):
        self.repository = repository

    async def execute(self, command: CreateTaskCommand) -> Task:
        """
        Returns:
            The created task, not yet completed.

        Raises:
            ValidationError: empty user id or title.
            NotFoundError: the user does not exist.
        """
        with tracer.start_as_current_span("use_case.create_task") as span:
            user_id = UserId(command.user_id)
            task = Task(TaskId.generate(), user_id, command.title, command.description)
            span.set_attribute("app.user_id", user_id.value)
            span.set_attribute("app.task_id", task.id.value)

            await self.repository.insert(task)

            logger.info("task_created", task_id=task.id.value, user_id=user_id.value)
            return task
