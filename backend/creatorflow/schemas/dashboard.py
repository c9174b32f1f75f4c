"""
Pydantic schemas for the dashboard overview.
"""
from pydantic import BaseModel
from decimal import Decimal
from creatorflow.schemas.delivery import DeliveryStats


class ProjectTotals(BaseModel):
    """Cost and settlement figures summed over every project."""
    project_count: int
    total_cost: Decimal
    total_paid: Decimal
    outstanding: Decimal  # Sum of per-project balances floored at zero


class DashboardSummary(BaseModel):
    influencer_count: int
    total_followers: int
    avg_engagement: float
    total_spent: Decimal  # Paid transactions
    total_pending: Decimal  # Pending transactions
    deliveries: DeliveryStats
    projects: ProjectTotals
