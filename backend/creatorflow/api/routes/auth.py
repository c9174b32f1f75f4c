"""
Authentication routes for login and logout.
"""
import logging
from fastapi import APIRouter, HTTPException, status
from creatorflow.schemas.user import UserLogin, Token, SessionUser
from creatorflow.core.security import authenticate, create_access_token, decode_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin):
    """Open a console session. Any non-empty email and password is accepted."""
    identity = authenticate(credentials.email, credentials.password)
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email and password are required"
        )

    access_token = create_access_token(
        data={"sub": identity["email"], "display_name": identity["display_name"]}
    )
    logger.info(f"Session opened for {identity['email']}")

    return Token(access_token=access_token, user=SessionUser(**identity))


@router.post("/logout")
async def logout(token: str):
    """Logout (client-side token removal)."""
    # Tokens are not tracked server-side; the client drops its copy
    decoded = decode_access_token(token)
    if not decoded:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )
    return {"message": "Logged out successfully"}
