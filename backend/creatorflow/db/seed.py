"""
Seed data for a fresh console: the demo roster, campaign transactions and
deliveries, plus the default administrator profile.
"""
import logging
from datetime import date
from decimal import Decimal
from sqlalchemy.orm import Session
from creatorflow.models import (
    Delivery, DeliveryStatus, Influencer, InfluencerStatus, PaymentStatus,
    Transaction, TransactionCategory, TransactionStatus, User, UserRole
)

logger = logging.getLogger(__name__)

DEMO_INFLUENCERS = [
    {
        "name": "Alex Rivera",
        "handle": "@alex_tech_tips",
        "followers": 1250000,
        "engagement_rate": 8.4,
        "avg_views": 450000,
        "niche": "Technology",
        "avatar": "https://picsum.photos/id/64/150/150",
        "status": InfluencerStatus.ACTIVE,
        "phone": "611681991",
        "salary": Decimal("500.00"),
        "contract_type": "6 Months",
        "target_videos": 10,
        "completed_videos": 4,
        "ad_types": ["Technology", "Software"],
        "platform": "TikTok",
        "notes": "Primary tech reviewer",
    },
    {
        "name": "Sarah Chen",
        "handle": "@sarahstyle",
        "followers": 890000,
        "engagement_rate": 12.2,
        "avg_views": 670000,
        "niche": "Fashion",
        "avatar": "https://picsum.photos/id/65/150/150",
        "status": InfluencerStatus.ACTIVE,
        "phone": "611681992",
        "salary": Decimal("400.00"),
        "contract_type": "3 Months",
        "target_videos": 5,
        "completed_videos": 2,
        "ad_types": ["Makeup", "Skincare"],
        "platform": "TikTok",
        "notes": "High engagement in beauty niche",
    },
]

# Keyed by position in DEMO_INFLUENCERS
DEMO_TRANSACTIONS = [
    (0, {
        "amount": Decimal("2500.00"),
        "date": date(2023, 10, 12),
        "category": TransactionCategory.COMMISSION,
        "status": TransactionStatus.PAID,
        "description": "Q4 Gadget Review Series",
    }),
    (1, {
        "amount": Decimal("1800.00"),
        "date": date(2023, 11, 5),
        "category": TransactionCategory.AD_SPEND,
        "status": TransactionStatus.PENDING,
        "description": "Winter Collection Promo",
    }),
]

DEMO_DELIVERIES = [
    (0, {
        "product_name": "Tech Hub Pro",
        "quantity": 1,
        "date_sent": date(2024, 1, 20),
        "status": DeliveryStatus.DELIVERED,
        "payment_status": PaymentStatus.PAID,
        "price": Decimal("45.00"),
        "notes": "Standard review unit",
    }),
    (1, {
        "product_name": "Glow Cream",
        "quantity": 3,
        "date_sent": date(2024, 1, 25),
        "status": DeliveryStatus.SENT,
        "payment_status": PaymentStatus.UNPAID,
        "price": Decimal("15.50"),
        "notes": "PR package for winter campaign",
    }),
]

DEFAULT_ADMIN = {
    "email": "admin@creatorflow.com",
    "display_name": "System Admin",
    "role": UserRole.ADMIN,
}


def seed_admin(db: Session) -> None:
    if db.query(User).count() == 0:
        db.add(User(**DEFAULT_ADMIN))
        db.commit()
        logger.info("Seeded default admin user")


def seed_demo_data(db: Session) -> None:
    """Insert the demo roster and its records into an empty database."""
    if db.query(Influencer).count() > 0:
        return

    influencers = [Influencer(**fields) for fields in DEMO_INFLUENCERS]
    db.add_all(influencers)
    db.flush()

    for index, fields in DEMO_TRANSACTIONS:
        db.add(Transaction(influencer_id=influencers[index].id, **fields))
    for index, fields in DEMO_DELIVERIES:
        influencer = influencers[index]
        db.add(Delivery(influencer_id=influencer.id, influencer_name=influencer.name, **fields))

    db.commit()
    logger.info(f"Seeded {len(influencers)} demo influencers with transactions and deliveries")
