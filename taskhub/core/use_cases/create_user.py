# taskhub/core/use_cases/create_user.py
from dataclasses import dataclass

import structlog

from taskhub.core.domain.models import User
from taskhub.core.domain.value_objects import UserId
from taskhub.core.ports.user_repository import IUserRepository
from taskhub.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class CreateUserCommand:
    """Raw input for creating a user; validated by the User aggregate."""
    name: str
    email: str


class CreateUser:
    """
    Use Case: Registers a new user.

    Responsibilities:
    1. Build the User aggregate (which validates name and email).
    2. Insert it through the repository port.

    Email uniqueness is not pre-checked: the store rejects duplicates at
    write time and the adapter reports them as AlreadyExistsError.
    """

    def __init__(self, repository: IUserRepository):
        self.repository = repository

    async def execute(self, command: CreateUserCommand) -> User:
        with tracer.start_as_current_span("use_case.create_user") as span:
            user = User(UserId.generate(), command.name, command.email)
            span.set_attribute("app.user_id", user.id.value)

            await self.repository.insert(user)

            logger.info("user_created", user_id=user.id.value)
            return user
