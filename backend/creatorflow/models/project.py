"""
Project and expense line item models for budget tracking and invoicing.
"""
from sqlalchemy import Column, String, Numeric, ForeignKey, Integer, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship
from creatorflow.db.base import BaseModel
import enum


class PaymentStatus(str, enum.Enum):
    """Settlement state shared by projects and deliveries."""
    PAID = "Paid"
    UNPAID = "Unpaid"


class Project(BaseModel):
    """Budgeted unit of work owning an ordered list of expense line items."""
    __tablename__ = "projects"

    title = Column(String(200), nullable=False)
    budget = Column(Numeric(15, 2), nullable=False, default=0)
    paid_amount = Column(Numeric(15, 2), nullable=False, default=0)  # Cumulative, only raised by payments
    created_label = Column(String(20), nullable=False)  # e.g. "Oct 18, 2026", fixed at creation
    status = Column(SQLEnum(PaymentStatus), default=PaymentStatus.UNPAID, nullable=False)

    # Relationships
    expenses = relationship(
        "ExpenseItem",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ExpenseItem.id",
    )


class ExpenseItem(BaseModel):
    """A single billable line within a project. Line amount is always derived."""
    __tablename__ = "expense_items"

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    category = Column(String(50), nullable=False, default="Other")  # Not validated against the registry
    quantity = Column(Integer, nullable=False, default=1)
    unit_price = Column(Numeric(15, 2), nullable=False, default=0)

    # Relationships
    project = relationship("Project", back_populates="expenses")
