"""
Influencer roster model.
"""
from sqlalchemy import Column, String, Numeric, Integer, Float, Text, JSON, Enum as SQLEnum
from creatorflow.db.base import BaseModel
import enum


class InfluencerStatus(str, enum.Enum):
    ACTIVE = "active"
    NEGOTIATING = "negotiating"
    ARCHIVED = "archived"


class Influencer(BaseModel):
    """A creator on the roster, with contract and video progress tracking."""
    __tablename__ = "influencers"

    name = Column(String(100), nullable=False)
    handle = Column(String(100), nullable=False, default="")
    followers = Column(Integer, nullable=False, default=0)
    engagement_rate = Column(Float, nullable=False, default=0.0)
    avg_views = Column(Integer, nullable=False, default=0)
    niche = Column(String(100), nullable=False, default="")
    avatar = Column(String(500), nullable=False, default="")
    status = Column(SQLEnum(InfluencerStatus), default=InfluencerStatus.ACTIVE, nullable=False)
    phone = Column(String(50), nullable=False, default="")
    salary = Column(Numeric(15, 2), nullable=False, default=0)
    contract_type = Column(String(50), nullable=False, default="")
    target_videos = Column(Integer, nullable=False, default=0)
    completed_videos = Column(Integer, nullable=False, default=0)
    ad_types = Column(JSON, nullable=False, default=list)
    platform = Column(String(50), nullable=False, default="TikTok")
    notes = Column(Text, nullable=False, default="")
