"""
Tasks API

Every route runs as the authenticated caller; a task owned by someone else
answers 404 exactly like a missing one. An unknown ``status`` is a 400.
"""

from fastapi import APIRouter, Depends, status
import logging

from api.errors import to_http_exception, no_fields_to_update
from core.dependencies import CurrentUser, get_current_user, get_task_service
from core.exceptions import ApplicationException
from schemas.common import ErrorResponse, MessageResponse
from schemas.task import (
    CreateTaskRequest,
    UpdateTaskRequest,
    TaskResponse,
    TaskListResponse,
    TaskStatsResponse,
)
from services.task_service import TaskService

logger = logging.getLogger("TASKS_API")

router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    request: CreateTaskRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    try:
        return service.create(request.model_dump(), current_user.owner_id)
    except ApplicationException as e:
        raise to_http_exception(e)


@router.get("", response_model=TaskListResponse)
def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    return service.list_all(current_user.owner_id)


# Declared before /{task_id} so "stats" is not taken for an id
@router.get("/stats", response_model=TaskStatsResponse)
def task_stats(
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    return service.stats(current_user.owner_id)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    try:
        return service.get_by_id(task_id, current_user.owner_id)
    except ApplicationException as e:
        raise to_http_exception(e)


@router.patch("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    updates = request.model_dump(exclude_unset=True)
    if not updates:
        raise no_fields_to_update()

    try:
        return service.update(task_id, updates, current_user.owner_id)
    except ApplicationException as e:
        raise to_http_exception(e)


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    try:
        return service.delete(task_id, current_user.owner_id)
    except ApplicationException as e:
        raise to_http_exception(e)
