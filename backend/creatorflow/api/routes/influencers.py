"""
Influencer roster and progress tracking routes.
"""
from fastapi import APIRouter, Depends, Path, status
from typing import List
from creatorflow.schemas.influencer import InfluencerCreate, InfluencerResponse, InfluencerUpdate
from creatorflow.schemas.user import SessionUser
from creatorflow.api.dependencies import get_current_user, get_store
from creatorflow.services.document_store import DocumentStore
from creatorflow.services.influencer_service import INFLUENCERS, reset_progress, toggle_progress

router = APIRouter(prefix="/influencers", tags=["influencers"])


@router.get("", response_model=List[InfluencerResponse])
async def list_influencers(
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """List the roster in arrival order."""
    return store.list_documents(INFLUENCERS)


@router.post("", response_model=InfluencerResponse, status_code=status.HTTP_201_CREATED)
async def create_influencer(
    influencer_data: InfluencerCreate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Add an influencer to the roster."""
    return store.create(INFLUENCERS, **influencer_data.model_dump())


@router.get("/{influencer_id}", response_model=InfluencerResponse)
async def get_influencer(
    influencer_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    return store.get(INFLUENCERS, influencer_id)


@router.patch("/{influencer_id}", response_model=InfluencerResponse)
async def update_influencer(
    influencer_id: int,
    influencer_data: InfluencerUpdate,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Update influencer fields."""
    patch = influencer_data.model_dump(exclude_unset=True, exclude_none=True)
    return store.update(INFLUENCERS, influencer_id, patch)


@router.delete("/{influencer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_influencer(
    influencer_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    store.delete(INFLUENCERS, influencer_id)


@router.post("/{influencer_id}/progress/{index}", response_model=InfluencerResponse)
async def toggle_influencer_progress(
    influencer_id: int,
    index: int = Path(ge=0),
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Click a video progress box (0-based index)."""
    return toggle_progress(store, influencer_id, index)


@router.post("/{influencer_id}/reset", response_model=InfluencerResponse)
async def reset_influencer_progress(
    influencer_id: int,
    current_user: SessionUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
):
    """Set completed videos back to zero."""
    return reset_progress(store, influencer_id)
