# taskhub/core/use_cases/complete_task.py
import structlog

from taskhub.core.domain.exceptions import NotFoundError
from taskhub.core.domain.models import Task
from taskhub.core.domain.value_objects import TaskId
from taskhub.core.ports.task_repository import ITaskRepository
from taskhub.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class CompleteTask:
    """
    Use Case: Marks a task as completed.

    Completing is one-way and not idempotent: a task that is already
    completed makes this use case raise ValidationError and nothing is written.
    """

    def __init__(self, repository: ITaskRepository):
        self.repository = repository

    async def execute(self, id: str) -> Task:
        with tracer.start_as_current_span("use_case.complete_task") as span:
            task_id = TaskId(id)
            span.set_attribute("app.task_id", task_id.value)

            task = await self.repository.find_by_id(task_id)
            if task is None:
                raise NotFoundError(f"{TaskId.label} not found")

            task.complete()
            await self.repository.update(task)

            logger.info("task_completed", task_id=task_id.value)
            return task
