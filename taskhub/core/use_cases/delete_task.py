# taskhub/core/use_cases/delete_task.py
import structlog

from taskhub.core.domain.exceptions import NotFoundError
from taskhub.core.domain.value_objects import TaskId
from taskhub.core.ports.task_repository import ITaskRepository
from taskhub.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class DeleteTask:
    """Use Case: Deletes a task; a missing row is reported as NotFoundError."""

    def __init__(self, repository: ITaskRepository):
        self.repository = repository

    async def execute(self, id: str) -> None:
        with tracer.start_as_current_span("use_case.delete_task") as span:
            task_id = TaskId(id)
            span.set_attribute("app.task_id", task_id.value)

            if not await self.repository.delete(task_id):
                raise NotFoundError(f"{TaskId.label} not found")

            logger.info("task_deleted", task_id=task_id.value)
