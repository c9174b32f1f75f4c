"""
Pydantic schemas for Project and ExpenseItem entities.
"""
from pydantic import BaseModel, Field, computed_field, field_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from creatorflow.models.project import PaymentStatus
from creatorflow.services.project_service import line_amount


class ProjectCreate(BaseModel):
    """Schema for project creation."""
    title: str
    budget: Decimal = Decimal(0)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Project title is required")
        return v


class ProjectUpdate(BaseModel):
    """Schema for project update. Paid amount and status are payment-driven only."""
    title: Optional[str] = None
    budget: Optional[Decimal] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Project title is required")
        return v


class ExpenseItemCreate(BaseModel):
    """Schema for a new line item. Defaults match a freshly added blank row."""
    description: str = ""
    category: Optional[str] = None  # Falls back to the protected default category
    quantity: int = 1
    unit_price: Decimal = Decimal(0)


class ExpenseItemUpdate(BaseModel):
    """Partial patch for a line item."""
    description: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = None
    unit_price: Optional[Decimal] = None


class ExpenseItemResponse(BaseModel):
    """Schema for line item response."""
    id: int
    description: str
    category: str
    quantity: int
    unit_price: Decimal

    @computed_field
    @property
    def amount(self) -> Decimal:
        return line_amount(self)

    class Config:
        from_attributes = True


class ProjectResponse(BaseModel):
    """Schema for project response."""
    id: int
    title: str
    budget: Decimal
    paid_amount: Decimal
    created_label: str
    status: PaymentStatus
    expenses: List[ExpenseItemResponse] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProjectSummary(BaseModel):
    """Derived budget and settlement figures for a project."""
    project_id: int
    title: str
    budget: Decimal
    total_cost: Decimal
    paid_amount: Decimal
    balance: Decimal  # Signed, negative on overpayment
    display_balance: Decimal  # Floored at zero
    percent_used: Decimal
    has_budget: bool
    status: PaymentStatus
    item_count: int


class PaymentCreate(BaseModel):
    """Schema for recording a payment against a project."""
    amount: Decimal = Field(decimal_places=2)
