"""
Operational task model.
"""
from sqlalchemy import Column, String, Date, Enum as SQLEnum
from creatorflow.db.base import BaseModel
import enum


class TaskStatus(str, enum.Enum):
    DONE = "Done"
    NOT_DONE = "Not Done"


class TaskPriority(str, enum.Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Task(BaseModel):
    """A to-do item on the operations board."""
    __tablename__ = "tasks"

    title = Column(String(200), nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(SQLEnum(TaskStatus), default=TaskStatus.NOT_DONE, nullable=False)
    priority = Column(SQLEnum(TaskPriority), default=TaskPriority.MEDIUM, nullable=False)
