"""Models package - Import all models for SQLAlchemy registration."""
from creatorflow.models.user import User, UserRole
from creatorflow.models.influencer import Influencer, InfluencerStatus
from creatorflow.models.transaction import Transaction, TransactionCategory, TransactionStatus
from creatorflow.models.delivery import Delivery, DeliveryStatus
from creatorflow.models.project import Project, ExpenseItem, PaymentStatus
from creatorflow.models.task import Task, TaskStatus, TaskPriority
from creatorflow.models.category import Category

__all__ = [
    "User",
    "UserRole",
    "Influencer",
    "InfluencerStatus",
    "Transaction",
    "TransactionCategory",
    "TransactionStatus",
    "Delivery",
    "DeliveryStatus",
    "Project",
    "ExpenseItem",
    "PaymentStatus",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "Category",
]
