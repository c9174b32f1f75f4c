"""
Campaign transaction model for influencer spend.
"""
from sqlalchemy import Column, Numeric, Date, Integer, Text, Enum as SQLEnum
from creatorflow.db.base import BaseModel
import enum


class TransactionCategory(str, enum.Enum):
    COMMISSION = "commission"
    AD_SPEND = "ad_spend"
    PRODUCTION = "production"
    GIFT = "gift"


class TransactionStatus(str, enum.Enum):
    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


class Transaction(BaseModel):
    """Money paid or owed to an influencer."""
    __tablename__ = "transactions"

    influencer_id = Column(Integer, nullable=True, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    category = Column(SQLEnum(TransactionCategory), nullable=False)
    status = Column(SQLEnum(TransactionStatus), default=TransactionStatus.PENDING, nullable=False)
    description = Column(Text, nullable=False, default="")
