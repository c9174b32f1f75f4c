"""
System user model for console access management.
"""
from sqlalchemy import Column, String, Enum as SQLEnum
from creatorflow.db.base import BaseModel
import enum


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    STAFF = "staff"
    DELIVERY = "delivery"


class User(BaseModel):
    """A console operator profile. Credentials are not stored."""
    __tablename__ = "users"

    email = Column(String(100), unique=True, nullable=False, index=True)
    display_name = Column(String(100), nullable=False)
    role = Column(SQLEnum(UserRole), default=UserRole.STAFF, nullable=False)
    avatar = Column(String(500), nullable=True)
