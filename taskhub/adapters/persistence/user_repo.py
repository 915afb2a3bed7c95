# taskhub/adapters/persistence/user_repo.py
from typing import List, Optional

import structlog
from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskhub.adapters.persistence.errors import translate_errors
from taskhub.adapters.persistence.models import UserRecord
from taskhub.core.domain.models import User
from taskhub.core.domain.value_objects import UserId
from taskhub.core.ports.user_repository import IUserRepository

logger = structlog.get_logger()


class SqlAlchemyUserRepository(IUserRepository):
    """
    SQL implementation of the IUserRepository port.

    Each call runs in its own short transaction; the session is released
    before the method returns.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        with translate_errors("find", UserId.label):
            async with self._session_factory() as session:
                record = await session.get(UserRecord, user_id.value)
                return record.to_domain() if record else None

    async def find_all(self) -> List[User]:
        with translate_errors("list", UserId.label):
            async with self._session_factory() as session:
                rows = await session.scalars(
                    select(UserRecord).order_by(UserRecord.created_at, UserRecord.id)
                )
                return [row.to_domain() for row in rows]

    async def insert(self, user: User) -> None:
        with translate_errors("insert", UserId.label):
            async with self._session_factory.begin() as session:
                session.add(UserRecord.from_domain(user))

    async def update(self, user: User) -> None:
        with translate_errors("update", UserId.label):
            async with self._session_factory.begin() as session:
                await session.execute(
                    update(UserRecord)
                    .where(UserRecord.id == user.id.value)
                    .values(name=user.name, email=user.email.value, updated_at=func.now())
                    .execution_options(synchronize_session=False)
                )

    async def delete(self, user_id: UserId) -> bool:
        with translate_errors("delete", UserId.label):
            async with self._session_factory.begin() as session:
                result = await session.execute(
                    delete(UserRecord)
                    .where(UserRecord.id == user_id.value)
                    .execution_options(synchronize_session=False)
                )
                removed = result.rowcount > 0

        if removed:
            logger.debug("user_row_deleted", user_id=user_id.value)
        return removed
