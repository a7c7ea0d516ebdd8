"""
Authentication API
"""

from fastapi import APIRouter, Depends, status
import logging

from api.errors import to_http_exception
from core.dependencies import get_auth_service
from core.exceptions import DuplicateException, UnauthorizedException
from schemas.auth import RegisterRequest, LoginRequest, LoginResponse, UserSummary
from services.auth_service import AuthService

logger = logging.getLogger("AUTH_API")

router = APIRouter(
    prefix="/auth",
    tags=["Auth"]
)


@router.post("/register", response_model=UserSummary, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    try:
        return service.register(request.email, request.username, request.password)
    except DuplicateException as e:
        raise to_http_exception(e)


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    try:
        return service.login(request.email, request.password)
    except UnauthorizedException as e:
        raise to_http_exception(e)
