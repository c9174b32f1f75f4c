"""
Pydantic schemas for Delivery entity.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal
from creatorflow.models.delivery import DeliveryStatus
from creatorflow.models.project import PaymentStatus


class DeliveryBase(BaseModel):
    """Base delivery schema."""
    product_name: str
    quantity: int = 1
    date_sent: date = Field(default_factory=date.today)
    status: DeliveryStatus = DeliveryStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    price: Decimal = Decimal(0)
    notes: str = ""


class DeliveryCreate(DeliveryBase):
    """Schema for delivery creation. The influencer name is resolved server-side."""
    influencer_id: int

    @field_validator("product_name")
    @classmethod
    def product_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Product name is required")
        return v


class DeliveryUpdate(BaseModel):
    """Schema for delivery update."""
    influencer_id: Optional[int] = None
    product_name: Optional[str] = None
    quantity: Optional[int] = None
    date_sent: Optional[date] = None
    status: Optional[DeliveryStatus] = None
    payment_status: Optional[PaymentStatus] = None
    price: Optional[Decimal] = None
    notes: Optional[str] = None

    @field_validator("product_name")
    @classmethod
    def product_name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Product name is required")
        return v


class DeliveryResponse(DeliveryBase):
    """Schema for delivery response."""
    id: int
    influencer_id: Optional[int] = None
    influencer_name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class DeliveryBulkUpdate(BaseModel):
    """One patch applied to every selected delivery."""
    ids: List[int]
    status: Optional[DeliveryStatus] = None
    payment_status: Optional[PaymentStatus] = None

    @model_validator(mode="after")
    def patch_not_empty(self):
        if self.status is None and self.payment_status is None:
            raise ValueError("Bulk update needs a status or payment_status")
        return self

    def patch(self) -> dict:
        return self.model_dump(exclude={"ids"}, exclude_none=True)


class DeliveryBulkDelete(BaseModel):
    ids: List[int]


class BulkResult(BaseModel):
    """Number of records a bulk operation touched."""
    affected: int


class DeliveryStats(BaseModel):
    """Price totals split by payment status."""
    paid: Decimal
    unpaid: Decimal
    total: Decimal
