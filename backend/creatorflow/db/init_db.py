"""
Database initialization script.
"""
import logging
from creatorflow.core.config import settings
from creatorflow.db.session import SessionLocal, init_db
from creatorflow.db.seed import seed_admin, seed_demo_data
from creatorflow.services.category_service import CategoryRegistry
from creatorflow.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


def initialize() -> None:
    """Create tables and seed the registry, admin user and optional demo data."""
    init_db()
    db = SessionLocal()
    try:
        CategoryRegistry(DocumentStore(db)).ensure_defaults()
        seed_admin(db)
        if settings.SEED_DEMO_DATA:
            seed_demo_data(db)
    finally:
        db.close()


if __name__ == "__main__":
    from creatorflow.core.logging import init_logging
    init_logging(settings.LOG_LEVEL)
    print("Initializing database...")
    initialize()
    print("Database initialized successfully!")
