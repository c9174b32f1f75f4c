"""
In-memory projection of console collections.

The projection never writes. It only replaces a collection's contents with
each snapshot the change feed pushes, so it always mirrors the last state the
store committed.

It is a consumer-side helper. The API server never attaches one; HTTP clients
read the same snapshots from ``GET /api/feed/{collection}``, while in-process
consumers such as scripts and workers attach a projection to a feed.
"""
from typing import Callable, Dict, Iterable, List, Optional
from creatorflow.services.change_feed import ChangeFeed
from creatorflow.services.document_store import COLLECTIONS


class Projection:
    """Mirror of named collections, kept current by change feed snapshots."""

    def __init__(self):
        self._collections: Dict[str, List[dict]] = {}
        self._unsubscribers: List[Callable[[], None]] = []

    def apply(self, collection: str, snapshot: List[dict]) -> None:
        """Replace a collection with a freshly pushed snapshot."""
        self._collections[collection] = list(snapshot)

    def attach(self, feed: ChangeFeed, collections: Optional[Iterable[str]] = None) -> None:
        for name in collections or COLLECTIONS.keys():
            self._unsubscribers.append(feed.subscribe(name, self.apply))

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def get(self, collection: str) -> List[dict]:
        return list(self._collections.get(collection, []))

    def find(self, collection: str, doc_id: int) -> Optional[dict]:
        for doc in self._collections.get(collection, []):
            if doc.get("id") == doc_id:
                return doc
        return None
