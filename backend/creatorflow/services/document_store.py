"""
Document store over the SQLAlchemy session.

Every console collection is addressed by name. Writes commit first and then
echo the collection's new snapshot through the change feed, so readers never
see state the database has not accepted.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type
from pydantic import BaseModel as Schema
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from creatorflow.core.errors import NotFoundError, PersistenceError
from creatorflow.db.base import BaseModel
from creatorflow.models import Category, Delivery, Influencer, Project, Task, Transaction, User
from creatorflow.schemas.category import CategoryResponse
from creatorflow.schemas.delivery import DeliveryResponse
from creatorflow.schemas.influencer import InfluencerResponse
from creatorflow.schemas.project import ProjectResponse
from creatorflow.schemas.task import TaskResponse
from creatorflow.schemas.transaction import TransactionResponse
from creatorflow.schemas.user import UserResponse
from creatorflow.services.change_feed import ChangeFeed, change_feed

logger = logging.getLogger(__name__)

# Collection name -> (ORM model, snapshot schema)
COLLECTIONS: Dict[str, Tuple[Type[BaseModel], Type[Schema]]] = {
    "influencers": (Influencer, InfluencerResponse),
    "transactions": (Transaction, TransactionResponse),
    "deliveries": (Delivery, DeliveryResponse),
    "projects": (Project, ProjectResponse),
    "tasks": (Task, TaskResponse),
    "categories": (Category, CategoryResponse),
    "users": (User, UserResponse),
}

# Singular labels used in not-found messages
_LABELS = {
    "influencers": "Influencer",
    "transactions": "Transaction",
    "deliveries": "Delivery",
    "projects": "Project",
    "tasks": "Task",
    "categories": "Category",
    "users": "User",
}


def resolve_collection(collection: str) -> Type[BaseModel]:
    """Return the model for a collection name, or raise NotFoundError."""
    if collection not in COLLECTIONS:
        raise NotFoundError(f"Unknown collection '{collection}'")
    return COLLECTIONS[collection][0]


class DocumentStore:
    """Create, update, delete and batch writes over named collections."""

    def __init__(self, db: Session, feed: Optional[ChangeFeed] = None):
        self.db = db
        self.feed = feed if feed is not None else change_feed

    def get(self, collection: str, doc_id: int):
        model = resolve_collection(collection)
        doc = self.db.query(model).filter(model.id == doc_id).first()
        if not doc:
            raise NotFoundError(f"{_LABELS[collection]} not found")
        return doc

    def list_documents(self, collection: str) -> list:
        """All documents of a collection in arrival order."""
        model = resolve_collection(collection)
        return self.db.query(model).order_by(model.id).all()

    def create(self, collection: str, **fields: Any):
        model = resolve_collection(collection)
        doc = model(**fields)
        self.db.add(doc)
        self.commit(collection)
        self.db.refresh(doc)
        return doc

    def update(self, collection: str, doc_id: int, patch: Dict[str, Any]):
        doc = self.get(collection, doc_id)
        for field, value in patch.items():
            setattr(doc, field, value)
        self.commit(collection)
        self.db.refresh(doc)
        return doc

    def delete(self, collection: str, doc_id: int) -> None:
        doc = self.get(collection, doc_id)
        self.db.delete(doc)
        self.commit(collection)

    def batch_update(self, collection: str, ids: Iterable[int], patch: Dict[str, Any]) -> int:
        """Apply one patch to every document in ``ids`` within a single commit."""
        docs = self._select(collection, ids)
        for doc in docs:
            for field, value in patch.items():
                setattr(doc, field, value)
        self.commit(collection)
        return len(docs)

    def batch_delete(self, collection: str, ids: Iterable[int]) -> int:
        """Remove every document in ``ids`` within a single commit."""
        docs = self._select(collection, ids)
        for doc in docs:
            self.db.delete(doc)
        self.commit(collection)
        return len(docs)

    def snapshot(self, collection: str) -> List[dict]:
        docs = self.list_documents(collection)
        schema = COLLECTIONS[collection][1]
        return [schema.model_validate(doc).model_dump(mode="json") for doc in docs]

    def commit(self, collection: str) -> None:
        """Commit pending changes and echo the collection to subscribers."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Write to '{collection}' failed: {e}", exc_info=True)
            raise PersistenceError(f"Could not save changes to {collection}") from e

        if self.feed.has_subscribers(collection):
            self.feed.publish(collection, self.snapshot(collection))

    def _select(self, collection: str, ids: Iterable[int]) -> list:
        model = resolve_collection(collection)
        id_set = set(ids)
        if not id_set:
            return []
        return self.db.query(model).filter(model.id.in_(id_set)).all()
