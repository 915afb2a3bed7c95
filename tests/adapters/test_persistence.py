# tests/adapters/test_persistence.py
import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from taskhub.adapters.persistence.database import create_engine, create_session_factory, ping
from taskhub.adapters.persistence.errors import (
    ConstraintViolation,
    classify_violation,
    map_db_error,
    translate_errors,
)
from taskhub.adapters.persistence.task_repo import SqlAlchemyTaskRepository
from taskhub.adapters.persistence.user_repo import SqlAlchemyUserRepository
from taskhub.core.domain.exceptions import (
    AlreadyExistsError,
    InfrastructureError,
    NotFoundError,
)
from taskhub.core.domain.models import Task, User
from taskhub.core.domain.value_objects import TaskId, UserId
from tests.conftest import make_settings


class FakeDriverError(Exception):
    """Stands in for a driver exception carrying a PostgreSQL SQLSTATE."""

    def __init__(self, message, sqlstate=None):
        super().__init__(message)
        self.sqlstate = sqlstate


def integrity_error(message, sqlstate=None):
    return IntegrityError("INSERT ...", {}, FakeDriverError(message, sqlstate))


@pytest.fixture
def user_repo(session_factory):
    return SqlAlchemyUserRepository(session_factory)

@pytest.fixture
def task_repo(session_factory):
    return SqlAlchemyTaskRepository(session_factory)


class TestErrorMapping:

    def test_postgres_unique_email(self):
        exc = integrity_error(
            'duplicate key value violates unique constraint "users_email_key"\n'
            "DETAIL:  Key (email)=(a@example.com) already exists.",
            sqlstate="23505",
        )
        error = map_db_error(exc, "insert", "User")

        assert isinstance(error, AlreadyExistsError)
        assert error.message == "Email already exists"

    def test_postgres_unique_primary_key(self):
        """Only the first line counts; later lines may echo an email value."""
        exc = integrity_error(
            'duplicate key value violates unique constraint "users_pkey"\n'
            "DETAIL:  Key (id)=(email-1) already exists.",
            sqlstate="23505",
        )
        error = map_db_error(exc, "insert", "User")

        assert isinstance(error, AlreadyExistsError)
        assert error.message == "User already exists"

    def test_postgres_foreign_key_uses_referenced_label(self):
        exc = integrity_error(
            'insert or update on table "tasks" violates foreign key constraint "tasks_user_id_fkey"',
            sqlstate="23503",
        )
        error = map_db_error(exc, "insert", "Task", referenced="User")

        assert isinstance(error, NotFoundError)
        assert error.message == "User not found"

    def test_sqlite_messages(self):
        assert classify_violation(integrity_error("UNIQUE constraint failed: users.email")) is ConstraintViolation.UNIQUE
        assert classify_violation(integrity_error("FOREIGN KEY constraint failed")) is ConstraintViolation.FOREIGN_KEY

    def test_other_integrity_error_is_infrastructure(self):
        exc = integrity_error('null value in column "name" violates not-null constraint', sqlstate="23502")
        error = map_db_error(exc, "insert", "User")

        assert isinstance(error, InfrastructureError)
        assert error.message == "Failed to insert user"

    def test_operational_error_hides_cause(self):
        exc = OperationalError("SELECT 1", {}, Exception("password authentication failed"))
        error = map_db_error(exc, "find", "Task")

        assert isinstance(error, InfrastructureError)
        assert error.message == "Failed to find task"
        assert "password" not in error.message

    def test_translate_errors_chains_cause(self):
        cause = ConnectionRefusedError("connection refused")

        with pytest.raises(InfrastructureError) as excinfo:
            with translate_errors("list", "User"):
                raise cause

        assert excinfo.value.__cause__ is cause

    def test_translate_errors_leaves_domain_errors_alone(self):
        with pytest.raises(NotFoundError, match="already mapped"):
            with translate_errors("find", "User"):
                raise NotFoundError("already mapped")


@pytest.mark.asyncio
class TestUserRepository:

    async def test_round_trip(self, user_repo, sample_user):
        await user_repo.insert(sample_user)

        loaded = await user_repo.find_by_id(sample_user.id)

        assert loaded == sample_user
        assert loaded.name == sample_user.name
        assert loaded.email == sample_user.email

    async def test_find_missing_returns_none(self, user_repo):
        assert await user_repo.find_by_id(UserId("nobody")) is None

    async def test_find_all(self, user_repo, sample_user):
        other = User(UserId.generate(), "Bob", "bob@example.com")
        await user_repo.insert(sample_user)
        await user_repo.insert(other)

        users = await user_repo.find_all()

        assert {u.id for u in users} == {sample_user.id, other.id}

    async def test_duplicate_email(self, user_repo, sample_user):
        await user_repo.insert(sample_user)
        clash = User(UserId.generate(), "Alice Again", sample_user.email.value)

        with pytest.raises(AlreadyExistsError) as excinfo:
            await user_repo.insert(clash)

        assert excinfo.value.message == "Email already exists"

    async def test_duplicate_id(self, user_repo, sample_user):
        await user_repo.insert(sample_user)
        clash = User(sample_user.id, "Bob", "bob@example.com")

        with pytest.raises(AlreadyExistsError) as excinfo:
            await user_repo.insert(clash)

        assert excinfo.value.message == "User already exists"

    async def test_update(self, user_repo, sample_user):
        await user_repo.insert(sample_user)
        sample_user.update("Alicia", "alicia@example.com")

        await user_repo.update(sample_user)
        loaded = await user_repo.find_by_id(sample_user.id)

        assert loaded.name == "Alicia"
        assert loaded.email.value == "alicia@example.com"

    async def test_update_to_taken_email(self, user_repo, sample_user):
        other = User(UserId.generate(), "Bob", "bob@example.com")
        await user_repo.insert(sample_user)
        await user_repo.insert(other)
        other.update("Bob", sample_user.email.value)

        with pytest.raises(AlreadyExistsError, match="Email already exists"):
            await user_repo.update(other)

    async def test_delete_reports_row_count(self, user_repo, sample_user):
        await user_repo.insert(sample_user)

        assert await user_repo.delete(sample_user.id) is True
        assert await user_repo.delete(sample_user.id) is False
        assert await user_repo.find_by_id(sample_user.id) is None


@pytest.mark.asyncio
class TestTaskRepository:

    async def test_round_trip(self, user_repo, task_repo, sample_user, sample_task):
        await user_repo.insert(sample_user)
        await task_repo.insert(sample_task)

        loaded = await task_repo.find_by_id(sample_task.id)

        assert loaded == sample_task
        assert loaded.user_id == sample_task.user_id
        assert loaded.title == sample_task.title
        assert loaded.description == sample_task.description
        assert loaded.is_completed() is False

    async def test_unknown_owner_is_not_found(self, task_repo):
        orphan = Task(TaskId.generate(), UserId("ghost"), "Buy milk")

        with pytest.raises(NotFoundError) as excinfo:
            await task_repo.insert(orphan)

        assert excinfo.value.message == "User not found"
        assert await task_repo.find_by_id(orphan.id) is None

    async def test_completion_is_persisted(self, user_repo, task_repo, sample_user, sample_task):
        await user_repo.insert(sample_user)
        await task_repo.insert(sample_task)
        sample_task.complete()

        await task_repo.update(sample_task)

        assert (await task_repo.find_by_id(sample_task.id)).is_completed() is True

    async def test_find_by_user_id(self, user_repo, task_repo, sample_user, sample_task):
        bob = User(UserId.generate(), "Bob", "bob@example.com")
        await user_repo.insert(sample_user)
        await user_repo.insert(bob)
        await task_repo.insert(sample_task)
        await task_repo.insert(Task(TaskId.generate(), bob.id, "Walk dog"))

        alices = await task_repo.find_by_user_id(sample_user.id)

        assert [t.id for t in alices] == [sample_task.id]
        assert len(await task_repo.find_all()) == 2
        assert await task_repo.find_by_user_id(UserId("nobody")) == []

    async def test_deleting_user_cascades(self, user_repo, task_repo, sample_user, sample_task):
        second = Task(TaskId.generate(), sample_user.id, "Call mum")
        await user_repo.insert(sample_user)
        await task_repo.insert(sample_task)
        await task_repo.insert(second)

        assert await user_repo.delete(sample_user.id) is True

        assert await task_repo.find_by_id(sample_task.id) is None
        assert await task_repo.find_by_id(second.id) is None
        assert await task_repo.find_by_user_id(sample_user.id) == []

    async def test_delete_reports_row_count(self, user_repo, task_repo, sample_user, sample_task):
        await user_repo.insert(sample_user)
        await task_repo.insert(sample_task)

        assert await task_repo.delete(sample_task.id) is True
        assert await task_repo.delete(sample_task.id) is False


@pytest.mark.asyncio
class TestUnreachableDatabase:

    async def test_repository_raises_infrastructure_error(self, tmp_path):
        settings = make_settings(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'taskhub.db'}")
        engine = create_engine(settings)
        repo = SqlAlchemyUserRepository(create_session_factory(engine))

        try:
            with pytest.raises(InfrastructureError) as excinfo:
                await repo.find_by_id(UserId("u-1"))
        finally:
            await engine.dispose()

        assert excinfo.value.message == "Failed to find user"

    async def test_ping(self, tmp_path, test_settings):
        reachable = create_engine(test_settings)
        unreachable = create_engine(
            make_settings(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'taskhub.db'}")
        )
        try:
            assert await ping(reachable) is True
            assert await ping(unreachable) is False
        finally:
            await reachable.dispose()
            await unreachable.dispose()


@pytest.mark.asyncio
class TestConnectionPool:

    async def test_file_database_uses_configured_bounds(self, tmp_path):
        settings = make_settings(
            f"sqlite+aiosqlite:///{tmp_path / 'taskhub.db'}",
            DB_MIN_CONNECTIONS=2,
            DB_MAX_CONNECTIONS=4,
            DB_ACQUIRE_TIMEOUT_SECS=7,
        )
        engine = create_engine(settings)
        try:
            assert engine.pool.size() == 2
            assert engine.pool.timeout() == 7
        finally:
            await engine.dispose()

    async def test_in_memory_database_needs_no_pool_options(self):
        engine = create_engine(make_settings("sqlite+aiosqlite:///:memory:"))
        try:
            assert await ping(engine) is True
        finally:
            await engine.dispose()

    async def test_acquire_timeout_is_infrastructure_error(self, tmp_path):
        """
        Scenario: The only pooled connection is held while another call needs one.
        Expected: The checkout gives up after DB_ACQUIRE_TIMEOUT_SECS.
        """
        settings = make_settings(
            f"sqlite+aiosqlite:///{tmp_path / 'taskhub.db'}",
            DB_MIN_CONNECTIONS=1,
            DB_MAX_CONNECTIONS=1,
            DB_ACQUIRE_TIMEOUT_SECS=1,
        )
        engine = create_engine(settings)
        repo = SqlAlchemyUserRepository(create_session_factory(engine))

        try:
            async with engine.connect():
                with pytest.raises(InfrastructureError) as excinfo:
                    await repo.find_by_id(UserId("u-1"))
        finally:
            await engine.dispose()

        assert excinfo.value.message == "Failed to find user"
