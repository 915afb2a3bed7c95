# taskhub/core/use_cases/get_task.py
from typing import List, Optional

from taskhub.core.domain.exceptions import NotFoundError
from taskhub.core.domain.models import Task
from taskhub.core.domain.value_objects import TaskId, UserId
from taskhub.core.ports.task_repository import ITaskRepository
from taskhub.shared.telemetry import get_tracer

tracer = get_tracer(__name__)


class GetTask:
    """Use Case: Fetches a single task by id."""

    def __init__(self, repository: ITaskRepository):
        self.repository = repository

    async def execute(self, id: str) -> Task:
        with tracer.start_as_current_span("use_case.get_task") as span:
            task_id = TaskId(id)
            span.set_attribute("app.task_id", task_id.value)

            task = await self.repository.find_by_id(task_id)
            if task is None:
                raise NotFoundError(f"{TaskId.label} not found")
            return task


class ListTasks:
    """Use Case: Lists tasks, optionally only those owned by one user."""

    def __init__(self, repository: ITaskRepository):
        self.repository = repository

    async def execute(self, user_id: Optional[str] = None) -> List[Task]:
        """
        Args:
            user_id: Pass a raw user id to filter by owner, None to list all.
                An unknown user simply yields an empty list.
        """
        with tracer.start_as_current_span("use_case.list_tasks") as span:
            if user_id is None:
                return await self.repository.find_all()

            owner = UserId(user_id)
            span.set_attribute("app.user_id", owner.value)
            return await self.repository.find_by_user_id(owner)
