# taskhub/core/ports/user_repository.py
from typing import List, Optional, Protocol

from taskhub.core.domain.models import User
from taskhub.core.domain.value_objects import UserId


class IUserRepository(Protocol):
    """
    Port for persisting User aggregates.
    Every method may raise any DomainError; storage errors arrive already translated.
    """

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Returns the user, or None if no row has this id."""
        ...

    async def find_all(self) -> List[User]:
        ...

    async def insert(self, user: User) -> None:
        """
        Persists a new user.

        Raises:
            AlreadyExistsError: the id or the email is already taken.
        """
        ...

    async def update(self, user: User) -> None:
        """Writes the current name and email of an existing user."""
        ...

    async def delete(self, user_id: UserId) -> bool:
        """
        Removes the user (and, through the store, all of their tasks).

        Returns:
            True if a row existed and was removed.
        """
        ...
