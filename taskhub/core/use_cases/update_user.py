# taskhub/core/use_cases/update_user.py
from dataclasses import dataclass

import structlog

from taskhub.core.domain.exceptions import NotFoundError
from taskhub.core.domain.models import User
from taskhub.core.domain.value_objects import UserId
from taskhub.core.ports.user_repository import IUserRepository
from taskhub.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class UpdateUserCommand:
    name: str
    email: str


class UpdateUser:
    """
    Use Case: Replaces a user's name and email.

    This is load-then-mutate-then-persist, not a blind overwrite: the load
    step makes sure the target row exists and reports NotFoundError otherwise.
    Concurrent updates to the same user are last-write-wins.
    """

    def __init__(self, repository: IUserRepository):
        self.repository = repository

    async def execute(self, id: str, command: UpdateUserCommand) -> User:
        with tracer.start_as_current_span("use_case.update_user") as span:
            user_id = UserId(id)
            span.set_attribute("app.user_id", user_id.value)

            user = await self.repository.find_by_id(user_id)
            if user is None:
                raise NotFoundError(f"{UserId.label} not found")

            user.update(command.name, command.email)
            await self.repository.update(user)

            logger.info("user_updated", user_id=user_id.value)
            return user
