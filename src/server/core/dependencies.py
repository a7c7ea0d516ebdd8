from dataclasses import dataclass
from typing import Optional
from sqlalchemy.orm import Session
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from core.database import get_db
from core.exceptions import UnauthorizedException
from core.security import decode_access_token
import logging

logger = logging.getLogger('CORE_DEPENDENCIES')

bearer_scheme = HTTPBearer(auto_error=False)


# ============================================================================
# Authorization Dependencies
# ============================================================================

@dataclass(frozen=True)
class CurrentUser:
    """Caller identity attached to every authorized request."""
    owner_id: str
    email: Optional[str] = None


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser:
    """
    Resolve the bearer token into the caller's identity.

    Fails closed: a missing, malformed, tampered or expired token is a 401
    and no route body runs.

    Example:
        @router.get("/tasks")
        def list_tasks(current_user: CurrentUser = Depends(get_current_user)):
            ...
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = decode_access_token(credentials.credentials)
    except UnauthorizedException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return CurrentUser(owner_id=payload["sub"], email=payload.get("email"))


# ============================================================================
# Service Dependencies
# ============================================================================

def get_task_service(db: Session = Depends(get_db)):
    """
    Get TaskService instance.

    Args:
        db: Database session (automatically injected)

    Returns:
        TaskService: Owner-scoped task operations
    """
    from services.task_service import TaskService
    return TaskService(db)


def get_category_service(db: Session = Depends(get_db)):
    """
    Get CategoryService instance.

    Args:
        db: Database session (automatically injected)

    Returns:
        CategoryService: Owner-scoped category operations
    """
    from services.category_service import CategoryService
    return CategoryService(db)


def get_auth_service(db: Session = Depends(get_db)):
    from services.auth_service import AuthService
    return AuthService(db)


# ============================================================================
# External Service Dependencies
# ============================================================================

def get_image_host():
    """
    Get the image host client singleton.

    Returns:
        CloudinaryImageHost: Shared upload client
    """
    from integrations import get_image_host as _get_image_host
    return _get_image_host()


def get_profile_scraper():
    """
    Get the LinkedIn scraper singleton.

    Returns:
        LinkedInScraper: Shared scraper
    """
    from integrations import get_profile_scraper as _get_profile_scraper
    return _get_profile_scraper()


def get_user_service(
    db: Session = Depends(get_db),
    image_host=Depends(get_image_host),
    scraper=Depends(get_profile_scraper),
):
    """
    Get UserService instance wired with its external collaborators.
    """
    from services.user_service import UserService
    return UserService(db, image_host=image_host, scraper=scraper)
