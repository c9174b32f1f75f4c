"""
Shared registry of expense category labels.

The registry is a flat, insertion-ordered set of unique names. One protected
entry ("Other" by default) is the fallback for new line items and can never
be removed. Deleting a label does not touch line items that still use it.
"""
import logging
from typing import Iterable, List, Optional
from creatorflow.core.config import settings
from creatorflow.core.errors import CategoryExistsError, InvalidCategoryError
from creatorflow.models.category import Category
from creatorflow.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

CATEGORIES = "categories"


class CategoryRegistry:
    """Category registry backed by the ``categories`` collection."""

    def __init__(self, store: DocumentStore, protected: Optional[str] = None):
        self.store = store
        self.protected = protected or settings.PROTECTED_CATEGORY

    def names(self) -> List[str]:
        """All category names in insertion order."""
        return [c.name for c in self.store.list_documents(CATEGORIES)]

    def _find(self, name: str) -> Optional[Category]:
        return self.store.db.query(Category).filter(Category.name == name).first()

    def add(self, name: str) -> str:
        """
        Append a category.

        The name is trimmed and compared case-sensitively. Raises
        CategoryExistsError without changing anything when it is already
        registered.
        """
        name = (name or "").strip()
        if not name:
            raise InvalidCategoryError("Category name is required")
        if self._find(name):
            logger.info(f"Category '{name}' already exists")
            raise CategoryExistsError(name)
        self.store.create(CATEGORIES, name=name)
        return name

    def delete(self, name: str) -> bool:
        """Remove a category. Returns False for the protected entry or an unknown name."""
        name = (name or "").strip()
        if name == self.protected:
            logger.info(f"Refusing to delete protected category '{name}'")
            return False
        category = self._find(name)
        if not category:
            return False
        self.store.delete(CATEGORIES, category.id)
        return True

    def ensure_defaults(self, defaults: Optional[Iterable[str]] = None) -> None:
        """Seed the default labels into an empty registry. The protected entry always exists."""
        if not self.names():
            for name in defaults or settings.DEFAULT_CATEGORIES:
                if not self._find(name):
                    self.store.create(CATEGORIES, name=name)
        if not self._find(self.protected):
            self.store.create(CATEGORIES, name=self.protected)
