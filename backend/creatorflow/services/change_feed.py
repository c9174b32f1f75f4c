"""
In-process change feed for named document collections.

Writers publish the full, arrival-ordered snapshot of a collection after each
committed change; subscribers receive it synchronously.
"""
import logging
from collections import defaultdict
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

SnapshotHandler = Callable[[str, List[dict]], None]


class ChangeFeed:
    """Fan-out of collection snapshots to registered handlers."""

    def __init__(self):
        self._handlers: Dict[str, List[SnapshotHandler]] = defaultdict(list)

    def subscribe(self, collection: str, handler: SnapshotHandler) -> Callable[[], None]:
        """Register a handler and return a callable that removes it again."""
        self._handlers[collection].append(handler)
        logger.debug(f"Subscribed {handler!r} to '{collection}'")

        def unsubscribe() -> None:
            handlers = self._handlers.get(collection, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def has_subscribers(self, collection: str) -> bool:
        return bool(self._handlers.get(collection))

    def publish(self, collection: str, snapshot: List[dict]) -> None:
        # Copy so handlers may unsubscribe while being notified
        for handler in list(self._handlers.get(collection, [])):
            try:
                handler(collection, snapshot)
            except Exception:
                logger.exception(f"Change feed handler failed for '{collection}'")

    def clear(self) -> None:
        self._handlers.clear()


change_feed = ChangeFeed()
