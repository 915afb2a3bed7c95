# taskhub/core/use_cases/delete_user.py
import structlog

from taskhub.core.domain.exceptions import NotFoundError
from taskhub.core.domain.value_objects import UserId
from taskhub.core.ports.user_repository import IUserRepository
from taskhub.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class DeleteUser:
    """
    Use Case: Deletes a user.
    The store cascades the delete to every task the user owns.
    """

    def __init__(self, repository: IUserRepository):
        self.repository = repository

    async def execute(self, id: str) -> None:
        with tracer.start_as_current_span("use_case.delete_user") as span:
            user_id = UserId(id)
            span.set_attribute("app.user_id", user_id.value)

            if not await self.repository.delete(user_id):
                raise NotFoundError(f"{UserId.label} not found")

            logger.info("user_deleted", user_id=user_id.value)
