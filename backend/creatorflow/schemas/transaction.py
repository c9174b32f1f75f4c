"""
Pydantic schemas for Transaction entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date as Date, datetime
from decimal import Decimal
from creatorflow.models.transaction import TransactionCategory, TransactionStatus


class TransactionBase(BaseModel):
    """Base transaction schema."""
    influencer_id: Optional[int] = None
    amount: Decimal
    date: Date = Field(default_factory=Date.today)
    category: TransactionCategory
    status: TransactionStatus = TransactionStatus.PENDING
    description: str = ""


class TransactionCreate(TransactionBase):
    """Schema for transaction creation."""
    pass


class TransactionUpdate(BaseModel):
    """Schema for transaction update."""
    influencer_id: Optional[int] = None
    amount: Optional[Decimal] = None
    date: Optional[Date] = None
    category: Optional[TransactionCategory] = None
    status: Optional[TransactionStatus] = None
    description: Optional[str] = None


class TransactionResponse(TransactionBase):
    """Schema for transaction response."""
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
