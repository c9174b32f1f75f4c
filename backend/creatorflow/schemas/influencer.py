"""
Pydantic schemas for Influencer entity.
"""
from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from creatorflow.models.influencer import InfluencerStatus


class InfluencerBase(BaseModel):
    """Base influencer schema."""
    name: str
    handle: str = ""
    followers: int = 0
    engagement_rate: float = 0.0
    avg_views: int = 0
    niche: str = ""
    avatar: str = ""
    status: InfluencerStatus = InfluencerStatus.ACTIVE
    phone: str = ""
    salary: Decimal = Decimal(0)
    contract_type: str = ""
    target_videos: int = 0
    completed_videos: int = 0
    ad_types: List[str] = []
    platform: str = "TikTok"
    notes: str = ""


class InfluencerCreate(InfluencerBase):
    """Schema for influencer creation."""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Influencer name is required")
        return v


class InfluencerUpdate(BaseModel):
    """Schema for influencer update."""
    name: Optional[str] = None
    handle: Optional[str] = None
    followers: Optional[int] = None
    engagement_rate: Optional[float] = None
    avg_views: Optional[int] = None
    niche: Optional[str] = None
    avatar: Optional[str] = None
    status: Optional[InfluencerStatus] = None
    phone: Optional[str] = None
    salary: Optional[Decimal] = None
    contract_type: Optional[str] = None
    target_videos: Optional[int] = None
    completed_videos: Optional[int] = None
    ad_types: Optional[List[str]] = None
    platform: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Influencer name is required")
        return v


class InfluencerResponse(InfluencerBase):
    """Schema for influencer response."""
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
