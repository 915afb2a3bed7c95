# taskhub/core/use_cases/get_user.py
from typing import List

from taskhub.core.domain.exceptions import NotFoundError
from taskhub.core.domain.models import User
from taskhub.core.domain.value_objects import UserId
from taskhub.core.ports.user_repository import IUserRepository
from taskhub.shared.telemetry import get_tracer

tracer = get_tracer(__name__)


class GetUser:
    """Use Case: Fetches a single user by id."""

    def __init__(self, repository: IUserRepository):
        self.repository = repository

    async def execute(self, id: str) -> User:
        """
        Args:
            id: Raw user id taken from the request path.

        Raises:
            ValidationError: ``id`` is empty.
            NotFoundError: no user has this id.
        """
        with tracer.start_as_current_span("use_case.get_user") as span:
            user_id = UserId(id)
            span.set_attribute("app.user_id", user_id.value)

            user = await self.repository.find_by_id(user_id)
            if user is None:
                raise NotFoundError(f"{UserId.label} not found")
            return user


class ListUsers:
    """Use Case: Lists every user."""

    def __init__(self, repository: IUserRepository):
        self.repository = repository

    async def execute(self) -> List[User]:
        with tracer.start_as_current_span("use_case.list_users"):
            return await self.repository.find_all()
