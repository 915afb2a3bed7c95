# taskhub/shared/container.py
from dependency_injector import containers, providers

from taskhub.shared.config import settings
from taskhub.adapters.persistence.database import create_engine, create_session_factory
from taskhub.adapters.persistence.task_repo import SqlAlchemyTaskRepository
from taskhub.adapters.persistence.user_repo import SqlAlchemyUserRepository

from taskhub.core.use_cases.complete_task import CompleteTask
from taskhub.core.use_cases.create_task import CreateTask
from taskhub.core.use_cases.create_user import CreateUser
from taskhub.core.use_cases.delete_task import DeleteTask
from taskhub.core.use_cases.delete_user import DeleteUser
from taskhub.core.use_cases.get_task import GetTask, ListTasks
from taskhub.core.use_cases.get_user import GetUser, ListUsers
from taskhub.core.use_cases.update_user import UpdateUser


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    # Wrapped in a provider so tests can override it with their own Settings.
    settings = providers.Object(settings)

    # 2. Gateways (Infrastructure Adapters)

    # Engine (Singleton: one connection pool per process)
    engine = providers.Singleton(create_engine, settings=settings)

    session_factory = providers.Singleton(create_session_factory, engine=engine)

    # Persistence (Singleton: stateless, shared by every use case)
    user_repository = providers.Singleton(
        SqlAlchemyUserRepository,
        session_factory=session_factory,
    )

    task_repository = providers.Singleton(
        SqlAlchemyTaskRepository,
        session_factory=session_factory,
    )

    # 3. Use Cases (Application Logic)

    # Factory: New instance created for every request (stateless logic),
    # but with Singleton dependencies injected.

    create_user_use_case = providers.Factory(CreateUser, repository=user_repository)
    get_user_use_case = providers.Factory(GetUser, repository=user_repository)
    list_users_use_case = providers.Factory(ListUsers, repository=user_repository)
    update_user_use_case = providers.Factory(UpdateUser, repository=user_repository)
    delete_user_use_case = providers.Factory(DeleteUser, repository=user_repository)

    create_task_use_case = providers.Factory(CreateTask, repository=task_repository)
    get_task_use_case = providers.Factory(GetTask, repository=task_repository)
    list_tasks_use_case = providers.Factory(ListTasks, repository=task_repository)
    complete_task_use_case = providers.Factory(CompleteTask, repository=task_repository)
    delete_task_use_case = providers.Factory(DeleteTask, repository=task_repository)


# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
