"""
Expense category registry routes.
"""
from fastapi import APIRouter, Depends, status
from typing import List
from creatorflow.core.utils import format_response
from creatorflow.schemas.category import CategoryCreate
from creatorflow.schemas.user import SessionUser
from creatorflow.api.dependencies import get_current_user, get_store
from creatorflow.services.category_service import CategoryRegistry
from creatorflow.services.document_store import DocumentStore

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[str])
async def list_categories(
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Category names in insertion order."""
    return CategoryRegistry(store).names()


@router.post("", response_model=List[str], status_code=status.HTTP_201_CREATED)
async def add_category(
    category_data: CategoryCreate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Add a category; duplicates are rejected with 409."""
    registry = CategoryRegistry(store)
    registry.add(category_data.name)
    return registry.names()


@router.delete("/{name}")
async def delete_category(
    name: str,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Remove a category. The protected default is silently kept."""
    registry = CategoryRegistry(store)
    removed = registry.delete(name)
    message = "Category deleted" if removed else "Category unchanged"
    return format_response(registry.names(), message=message)
