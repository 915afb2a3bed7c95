# tests/conftest.py
import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock

from dependency_injector import providers

from taskhub.adapters.persistence.database import (
    create_engine,
    create_schema,
    create_session_factory,
)
from taskhub.core.domain.models import Task, User
from taskhub.core.domain.value_objects import TaskId, UserId
from taskhub.core.ports.task_repository import ITaskRepository
from taskhub.core.ports.user_repository import IUserRepository
from taskhub.shared.config import AppEnv, Settings
from taskhub.shared.container import Container


def make_settings(database_url: str, **overrides) -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    values = {
        "APP_ENV": AppEnv.TESTING,
        "DATABASE_URL": database_url,
        "LOG_LEVEL": "WARNING",
        "LOG_FORMAT": "console",
        "OTEL_EXPORTER_OTLP_ENDPOINT": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)

# --- Port doubles ---

@pytest.fixture(scope="function")
def mock_user_repository():
    """Returns a mock User Repository."""
    repo = MagicMock(spec=IUserRepository)
    # Async methods must be mocked with AsyncMock
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_all = AsyncMock(return_value=[])
    repo.insert = AsyncMock()
    repo.update = AsyncMock()
    repo.delete = AsyncMock(return_value=True)
    return repo

@pytest.fixture(scope="function")
def mock_task_repository():
    """Returns a mock Task Repository."""
    repo = MagicMock(spec=ITaskRepository)
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_by_user_id = AsyncMock(return_value=[])
    repo.find_all = AsyncMock(return_value=[])
    repo.insert = AsyncMock()
    repo.update = AsyncMock()
    repo.delete = AsyncMock(return_value=True)
    return repo

# --- Containers ---

@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return make_settings(f"sqlite+aiosqlite:///{tmp_path / 'taskhub.db'}")

@pytest.fixture(scope="function")
def container(test_settings, mock_user_repository, mock_task_repository):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides the SQL repositories with the mocks defined above.
    """
    container = Container()
    container.settings.override(providers.Object(test_settings))

    # Override dependencies with mocks
    container.user_repository.override(mock_user_repository)
    container.task_repository.override(mock_task_repository)

    yield container

    # Clean up overrides after test
    container.reset_override()

@pytest.fixture(scope="function")
def sqlite_container(test_settings):
    """A container wired to real repositories over a temporary SQLite file."""
    container = Container()
    container.settings.override(providers.Object(test_settings))
    yield container
    container.reset_override()

# --- Database ---

@pytest_asyncio.fixture
async def session_factory(test_settings):
    """Fresh schema in a temporary SQLite file; the engine is disposed afterwards."""
    engine = create_engine(test_settings)
    await create_schema(engine)
    yield create_session_factory(engine)
    await engine.dispose()

# --- Sample aggregates ---

@pytest.fixture
def sample_user():
    """Provides a valid User that has not been persisted."""
    return User(UserId.generate(), "Alice", "alice@example.com")

@pytest.fixture
def sample_task(sample_user):
    """Provides a valid, open Task owned by ``sample_user``."""
    return Task(TaskId.generate(), sample_user.id, "Buy milk", "2 litres")
