"""
Dashboard aggregation over the roster, transactions, deliveries and projects.
"""
from decimal import Decimal
from sqlalchemy.orm import Session
from creatorflow.core.utils import to_money
from creatorflow.models.delivery import Delivery
from creatorflow.models.influencer import Influencer
from creatorflow.models.project import Project
from creatorflow.models.transaction import Transaction, TransactionStatus
from creatorflow.schemas.dashboard import DashboardSummary, ProjectTotals
from creatorflow.schemas.delivery import DeliveryStats
from creatorflow.services.delivery_service import delivery_stats
from creatorflow.services.project_service import compute_total_cost, display_balance


def project_totals(projects) -> ProjectTotals:
    total_cost = sum((compute_total_cost(p) for p in projects), Decimal("0.00"))
    total_paid = sum((to_money(p.paid_amount) for p in projects), Decimal("0.00"))
    outstanding = sum((display_balance(p) for p in projects), Decimal("0.00"))
    return ProjectTotals(
        project_count=len(projects),
        total_cost=total_cost,
        total_paid=total_paid,
        outstanding=outstanding
    )


def build_summary(db: Session) -> DashboardSummary:
    """Headline figures for the console overview."""
    influencers = db.query(Influencer).all()
    transactions = db.query(Transaction).all()
    deliveries = db.query(Delivery).all()
    projects = db.query(Project).all()

    # No roster means no average rather than a division by zero
    avg_engagement = 0.0
    if influencers:
        avg_engagement = round(sum(i.engagement_rate for i in influencers) / len(influencers), 1)

    return DashboardSummary(
        influencer_count=len(influencers),
        total_followers=sum(i.followers for i in influencers),
        avg_engagement=avg_engagement,
        total_spent=sum(
            (to_money(t.amount) for t in transactions if t.status == TransactionStatus.PAID),
            Decimal("0.00")
        ),
        total_pending=sum(
            (to_money(t.amount) for t in transactions if t.status == TransactionStatus.PENDING),
            Decimal("0.00")
        ),
        deliveries=DeliveryStats(**delivery_stats(deliveries)),
        projects=project_totals(projects)
    )
