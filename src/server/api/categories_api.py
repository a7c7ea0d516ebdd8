"""
Categories API

Every route runs as the authenticated caller; a category owned by someone
else answers 404 exactly like a missing one.
"""

from fastapi import APIRouter, Depends, status
import logging

from api.errors import to_http_exception, no_fields_to_update
from core.dependencies import CurrentUser, get_current_user, get_category_service
from core.exceptions import ApplicationException
from schemas.category import (
    CreateCategoryRequest,
    UpdateCategoryRequest,
    CategoryResponse,
    CategoryListResponse,
)
from schemas.common import ErrorResponse, MessageResponse
from services.category_service import CategoryService

logger = logging.getLogger("CATEGORIES_API")

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    request: CreateCategoryRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
):
    try:
        return service.create(request.model_dump(), current_user.owner_id)
    except ApplicationException as e:
        raise to_http_exception(e)


@router.get("", response_model=CategoryListResponse)
def list_categories(
    current_user: CurrentUser = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
):
    return service.list_all(current_user.owner_id)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
):
    try:
        return service.get_by_id(category_id, current_user.owner_id)
    except ApplicationException as e:
        raise to_http_exception(e)


@router.patch("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    request: UpdateCategoryRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
):
    updates = request.model_dump(exclude_unset=True)
    if not updates:
        raise no_fields_to_update()

    try:
        return service.update(category_id, updates, current_user.owner_id)
    except ApplicationException as e:
        raise to_http_exception(e)


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
):
    try:
        return service.delete(category_id, current_user.owner_id)
    except ApplicationException as e:
        raise to_http_exception(e)
