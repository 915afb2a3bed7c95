# taskhub/adapters/persistence/task_repo.py
from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskhub.adapters.persistence.errors import translate_errors
from taskhub.adapters.persistence.models import TaskRecord
from taskhub.core.domain.models import Task
from taskhub.core.domain.value_objects import TaskId, UserId
from taskhub.core.ports.task_repository import ITaskRepository


class SqlAlchemyTaskRepository(ITaskRepository):
    """
    SQL implementation of the ITaskRepository port.

    The owning user is never checked up front: the ``tasks.user_id`` foreign
    key rejects the write and the violation surfaces as "User not found".
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        with translate_errors("find", TaskId.label):
            async with self._session_factory() as session:
                record = await session.get(TaskRecord, task_id.value)
                return record.to_domain() if record else None

    async def find_by_user_id(self, user_id: UserId) -> List[Task]:
        with translate_errors("list", TaskId.label):
            async with self._session_factory() as session:
                rows = await session.scalars(
                    select(TaskRecord)
                    .where(TaskRecord.user_id == user_id.value)
                    .order_by(TaskRecord.created_at, TaskRecord.id)
                )
                return [row.to_domain() for row in rows]

    async def find_all(self) -> List[Task]:
        with translate_errors("list", TaskId.label):
            async with self._session_factory() as session:
                rows = await session.scalars(
                    select(TaskRecord).order_by(TaskRecord.created_at, TaskRecord.id)
                )
                return [row.to_domain() for row in rows]

    async def insert(self, task: Task) -> None:
        with translate_errors("insert", TaskId.label, referenced=UserId.label):
            async with self._session_factory.begin() as session:
                session.add(TaskRecord.from_domain(task))

    async def update(self, task: Task) -> None:
        with translate_errors("update", TaskId.label, referenced=UserId.label):
            async with self._session_factory.begin() as session:
                await session.execute(
                    update(TaskRecord)
                    .where(TaskRecord.id == task.id.value)
                    .values(
                        title=task.title,
                        description=task.description,
                        completed=task.is_completed(),
                        updated_at=func.now(),
                    )
                    .execution_options(synchronize_session=False)
                )

    async def delete(self, task_id: TaskId) -> bool:
        with translate_errors("delete", TaskId.label):
            async with self._session_factory.begin() as session:
                result = await session.execute(
                    delete(TaskRecord)
                    .where(TaskRecord.id == task_id.value)
                    .execution_options(synchronize_session=False)
                )
                return result.rowcount > 0
