"""
Authentication Pydantic Schemas
"""

from pydantic import BaseModel, Field, EmailStr


class RegisterRequest(BaseModel):
    """Request schema for account registration."""

    email: EmailStr
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserSummary(BaseModel):
    """Identity fields returned by register and login."""

    id: str
    email: str
    username: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserSummary
