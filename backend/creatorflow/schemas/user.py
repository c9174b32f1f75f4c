"""
Pydantic schemas for console users and the login session.
"""
from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime
from creatorflow.models.user import UserRole


class SessionUser(BaseModel):
    """Identity blob carried by the session token."""
    email: str
    display_name: str


class UserLogin(BaseModel):
    """Schema for user login."""
    email: str
    password: str


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
    user: SessionUser


class UserCreate(BaseModel):
    """Schema for granting console access."""
    email: EmailStr
    display_name: str
    role: UserRole = UserRole.STAFF


class UserResponse(BaseModel):
    """Schema for user response."""
    id: int
    email: str
    display_name: str
    role: UserRole
    avatar: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
