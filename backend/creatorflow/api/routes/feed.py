"""
Collection snapshot routes backing the console's live views.
"""
from fastapi import APIRouter, Depends
from typing import List
from creatorflow.schemas.user import SessionUser
from creatorflow.api.dependencies import get_current_user, get_store
from creatorflow.services.document_store import DocumentStore, resolve_collection

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("/{collection}", response_model=List[dict])
async def get_collection_snapshot(
    collection: str,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Current arrival-ordered snapshot of a named collection."""
    resolve_collection(collection)
    return store.snapshot(collection)
