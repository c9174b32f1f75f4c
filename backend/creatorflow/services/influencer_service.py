"""
Influencer roster helpers for video progress tracking.
"""
from creatorflow.core.errors import InvalidProgressError
from creatorflow.models.influencer import Influencer
from creatorflow.services.document_store import DocumentStore

INFLUENCERS = "influencers"


def next_progress(completed_videos: int, index: int) -> int:
    """
    Completed count after clicking the progress box at ``index`` (0-based).

    Clicking box ``index`` marks ``index + 1`` videos done; clicking the box
    that already holds the current count steps back by one.
    """
    target = index + 1
    return index if completed_videos == target else target


def toggle_progress(store: DocumentStore, influencer_id: int, index: int) -> Influencer:
    """Apply a click on progress box ``index``; only boxes 0..target_videos-1 exist."""
    influencer = store.get(INFLUENCERS, influencer_id)
    if index < 0 or index >= influencer.target_videos:
        raise InvalidProgressError(
            f"Progress box {index} is out of range for {influencer.target_videos} target videos"
        )
    completed = next_progress(influencer.completed_videos, index)
    return store.update(INFLUENCERS, influencer_id, {"completed_videos": completed})


def reset_progress(store: DocumentStore, influencer_id: int) -> Influencer:
    return store.update(INFLUENCERS, influencer_id, {"completed_videos": 0})
