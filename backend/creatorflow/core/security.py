"""
Security utilities for the console session token.

Login is a local stub: any non-empty email/password pair is accepted and the
resulting identity blob travels inside a signed JWT.
"""
from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from creatorflow.core.config import settings


def display_name_for(email: str) -> str:
    """Derive the console display name from the local part of an email."""
    return email.split("@")[0]


def authenticate(email: str, password: str) -> Optional[dict]:
    """Return the session identity for a login attempt, or None when rejected."""
    email = (email or "").strip()
    if not email or not password:
        return None
    return {"email": email, "display_name": display_name_for(email)}


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> Optional[dict]:
    """Decode and verify a JWT token."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError:
        return None
