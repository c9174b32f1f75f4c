"""
Console user management routes.
"""
from fastapi import APIRouter, Depends, status
from typing import List
from creatorflow.core.errors import DuplicateUserError, NotFoundError
from creatorflow.models.user import User
from creatorflow.schemas.user import SessionUser, UserCreate, UserResponse
from creatorflow.api.dependencies import get_current_user, get_store
from creatorflow.services.document_store import DocumentStore

router = APIRouter(prefix="/users", tags=["users"])

USERS = "users"


@router.get("/me", response_model=SessionUser)
async def get_current_user_info(current_user: SessionUser = Depends(get_current_user)):
    """Get the identity of the current session."""
    return current_user


@router.get("", response_model=List[UserResponse])
async def list_users(
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """List console users, newest first."""
    return list(reversed(store.list_documents(USERS)))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Grant console access to a new operator."""
    existing = store.db.query(User).filter(User.email == user_data.email).first()
    if existing:
        raise DuplicateUserError("Email already exists")
    return store.create(USERS, **user_data.model_dump())


@router.delete("/{email}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    email: str,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Revoke access for an operator."""
    user = store.db.query(User).filter(User.email == email).first()
    if not user:
        raise NotFoundError("User not found")
    store.delete(USERS, user.id)
