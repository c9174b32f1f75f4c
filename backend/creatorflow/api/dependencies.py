"""
Shared route dependencies: the session user and the document store.
"""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from creatorflow.core.security import decode_access_token
from creatorflow.db.session import get_db
from creatorflow.schemas.user import SessionUser
from creatorflow.services.document_store import DocumentStore

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme)
) -> SessionUser:
    """Resolve the session identity from the bearer token."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return SessionUser(email=payload["sub"], display_name=payload.get("display_name", ""))


def get_store(db: Session = Depends(get_db)) -> DocumentStore:
    """Dependency for a document store bound to the request's session."""
    return DocumentStore(db)
