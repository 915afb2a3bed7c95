# taskhub/adapters/api/routers/tasks.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from taskhub.adapters.api.dependencies import (
    get_complete_task_use_case,
    get_create_task_use_case,
    get_delete_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
)
from taskhub.adapters.api.schemas import CreateTaskRequest, ErrorResponse, TaskResponse
from taskhub.core.use_cases.complete_task import CompleteTask
from taskhub.core.use_cases.create_task import CreateTask, CreateTaskCommand
from taskhub.core.use_cases.delete_task import DeleteTask
from taskhub.core.use_cases.get_task import GetTask, ListTasks

router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Owning user does not exist"},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
    summary="Create a Task",
)
async def create_task(
    request: CreateTaskRequest,
    use_case: CreateTask = Depends(get_create_task_use_case),
):
    task = await use_case.execute(
        CreateTaskCommand(
            user_id=request.user_id,
            title=request.title,
            description=request.description,
        )
    )
    return TaskResponse.from_domain(task)


@router.get("", response_model=List[TaskResponse], summary="List Tasks")
async def list_tasks(
    user_id: Optional[str] = Query(None, description="Only return tasks owned by this user"),
    use_case: ListTasks = Depends(get_list_tasks_use_case),
):
    tasks = await use_case.execute(user_id)
    return [TaskResponse.from_domain(task) for task in tasks]


@router.get(
    "/{id}",
    response_model=TaskResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
    summary="Get a Task",
)
async def get_task(id: str, use_case: GetTask = Depends(get_get_task_use_case)):
    task = await use_case.execute(id)
    return TaskResponse.from_domain(task)


@router.patch(
    "/{id}/complete",
    response_model=TaskResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
    summary="Mark a Task Completed",
)
async def complete_task(id: str, use_case: CompleteTask = Depends(get_complete_task_use_case)):
    """
    Completes the task. Completion is one-way: a second call answers
    400 VALIDATION_ERROR and leaves the task unchanged.
    """
    task = await use_case.execute(id)
    return TaskResponse.from_domain(task)


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
    summary="Delete a Task",
)
async def delete_task(id: str, use_case: DeleteTask = Depends(get_delete_task_use_case)):
    await use_case.execute(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
