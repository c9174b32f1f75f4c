"""
Dashboard overview route.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from creatorflow.db.session import get_db
from creatorflow.schemas.dashboard import DashboardSummary
from creatorflow.schemas.user import SessionUser
from creatorflow.api.dependencies import get_current_user
from creatorflow.services.dashboard_service import build_summary

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
async def get_dashboard(
    current_user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Headline roster, spend, delivery and project figures."""
    return build_summary(db)
