# taskhub/adapters/api/dependencies.py
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine

from taskhub.core.use_cases.complete_task import CompleteTask
from taskhub.core.use_cases.create_task import CreateTask
from taskhub.core.use_cases.create_user import CreateUser
from taskhub.core.use_cases.delete_task import DeleteTask
from taskhub.core.use_cases.delete_user import DeleteUser
from taskhub.core.use_cases.get_task import GetTask, ListTasks
from taskhub.core.use_cases.get_user import GetUser, ListUsers
from taskhub.core.use_cases.update_user import UpdateUser
from taskhub.shared.container import Container

# -----------------------------------------------------------------------------
# Use case injection (users)
# -----------------------------------------------------------------------------
@inject
def get_create_user_use_case(
    use_case: CreateUser = Depends(Provide[Container.create_user_use_case]),
) -> CreateUser:
    return use_case


@inject
def get_get_user_use_case(
    use_case: GetUser = Depends(Provide[Container.get_user_use_case]),
) -> GetUser:
    return use_case


@inject
def get_list_users_use_case(
    use_case: ListUsers = Depends(Provide[Container.list_users_use_case]),
) -> ListUsers:
    return use_case


@inject
def get_update_user_use_case(
    use_case: UpdateUser = Depends(Provide[Container.update_user_use_case]),
) -> UpdateUser:
    return use_case


@inject
def get_delete_user_use_case(
    use_case: DeleteUser = Depends(Provide[Container.delete_user_use_case]),
) -> DeleteUser:
    return use_case


# -----------------------------------------------------------------------------
# Use case injection (tasks)
# -----------------------------------------------------------------------------
@inject
def get_create_task_use_case(
    use_case: CreateTask = Depends(Provide[Container.create_task_use_case]),
) -> CreateTask:
    return use_case


@inject
def get_get_task_use_case(
    use_case: GetTask = Depends(Provide[Container.get_task_use_case]),
) -> GetTask:
    return use_case


@inject
def get_list_tasks_use_case(
    use_case: ListTasks = Depends(Provide[Container.list_tasks_use_case]),
) -> ListTasks:
    return use_case


@inject
def get_complete_task_use_case(
    use_case: CompleteTask = Depends(Provide[Container.complete_task_use_case]),
) -> CompleteTask:
    return use_case


@inject
def get_delete_task_use_case(
    use_case: DeleteTask = Depends(Provide[Container.delete_task_use_case]),
) -> DeleteTask:
    return use_case


# -----------------------------------------------------------------------------
# Infrastructure
# -----------------------------------------------------------------------------
@inject
def get_engine(
    engine: AsyncEngine = Depends(Provide[Container.engine]),
) -> AsyncEngine:
    """Process-wide engine, used by the readiness probe."""
    return engine
