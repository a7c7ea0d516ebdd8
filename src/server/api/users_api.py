"""
User Profile API
"""

from fastapi import APIRouter, Depends, File, UploadFile, HTTPException, status
import logging

from api.errors import to_http_exception, no_fields_to_update
from core.dependencies import CurrentUser, get_current_user, get_user_service
from core.exceptions import ApplicationException
from schemas.common import ErrorResponse
from schemas.user import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UserProfileResponse,
    ProfileImageResponse,
    LinkedInScrapeRequest,
)
from services.user_service import UserService

logger = logging.getLogger("USERS_API")

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.get("/profile", response_model=UserProfileResponse)
def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    try:
        return service.get_profile(current_user.owner_id)
    except ApplicationException as e:
        raise to_http_exception(e)


@router.patch("/profile", response_model=UpdateProfileResponse)
def update_profile(
    request: UpdateProfileRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    updates = request.model_dump(exclude_unset=True, exclude_none=True)
    if not updates:
        raise no_fields_to_update()

    try:
        user = service.update_profile(current_user.owner_id, updates)
    except ApplicationException as e:
        raise to_http_exception(e)
    return UpdateProfileResponse(
        message="User profile updated successfully",
        user=UserProfileResponse.model_validate(user),
    )


@router.post("/profile/upload", response_model=ProfileImageResponse)
def upload_profile_image(
    file: UploadFile = File(None),
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    if file is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No file uploaded")

    content = file.file.read()
    try:
        user = service.upload_profile_image(
            current_user.owner_id, content, file.filename, file.content_type
        )
    except ApplicationException as e:
        raise to_http_exception(e)
    return ProfileImageResponse(
        message="Profile image updated successfully",
        profile_image=user.profile_image,
    )


@router.post("/linkedin/scrape/{user_id}", response_model=UpdateProfileResponse)
def scrape_linkedin(
    user_id: str,
    request: LinkedInScrapeRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    # Only the caller's own profile can be enriched
    if user_id != current_user.owner_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    try:
        user = service.scrape_linkedin(user_id, request.linkedin_url)
    except ApplicationException as e:
        logger.error(f"LinkedIn scrape failed for user {user_id}: {e.message}")
        raise to_http_exception(e)
    return UpdateProfileResponse(
        message="User profile updated with LinkedIn information successfully",
        user=UserProfileResponse.model_validate(user),
    )
