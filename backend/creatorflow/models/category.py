"""
Expense category registry model.
"""
from sqlalchemy import Column, String
from creatorflow.db.base import BaseModel


class Category(BaseModel):
    """A shared label for expense line items. Display order follows id."""
    __tablename__ = "categories"

    name = Column(String(50), unique=True, nullable=False, index=True)
