"""
Pydantic schemas for Task entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date, datetime
from creatorflow.models.task import TaskStatus, TaskPriority


class TaskBase(BaseModel):
    """Base task schema."""
    title: str
    due_date: date = Field(default_factory=date.today)
    priority: TaskPriority = TaskPriority.MEDIUM


class TaskCreate(TaskBase):
    """Schema for task creation. New tasks always start as Not Done."""

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Task title is required")
        return v


class TaskUpdate(BaseModel):
    """Schema for task update."""
    title: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[TaskPriority] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Task title is required")
        return v


class TaskResponse(TaskBase):
    """Schema for task response."""
    id: int
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TaskStats(BaseModel):
    done: int
    pending: int
