"""
Pydantic schemas for the category registry.
"""
from pydantic import BaseModel


class CategoryCreate(BaseModel):
    """Schema for adding a category. Whitespace is trimmed by the registry."""
    name: str


class CategoryResponse(BaseModel):
    """Schema for category response."""
    id: int
    name: str

    class Config:
        from_attributes = True
