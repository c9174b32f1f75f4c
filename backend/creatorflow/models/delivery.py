"""
Delivery model for product shipments to influencers.
"""
from sqlalchemy import Column, String, Numeric, Date, Integer, Text, Enum as SQLEnum
from creatorflow.db.base import BaseModel
from creatorflow.models.project import PaymentStatus
import enum


class DeliveryStatus(str, enum.Enum):
    """Shipment state. Transitions are unrestricted unless the guard is enabled."""
    PENDING = "Pending"
    SENT = "Sent"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class Delivery(BaseModel):
    """A product package sent to an influencer."""
    __tablename__ = "deliveries"

    influencer_id = Column(Integer, nullable=True, index=True)
    influencer_name = Column(String(100), nullable=False, default="Unknown")  # Denormalized at write time
    product_name = Column(String(200), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    date_sent = Column(Date, nullable=False, index=True)
    status = Column(SQLEnum(DeliveryStatus), default=DeliveryStatus.PENDING, nullable=False)
    payment_status = Column(SQLEnum(PaymentStatus), default=PaymentStatus.UNPAID, nullable=False)
    price = Column(Numeric(15, 2), nullable=False, default=0)
    notes = Column(Text, nullable=False, default="")
