"""
Shared fixtures: an in-memory database, a document store and an
authenticated API client.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import creatorflow.models  # noqa: F401
from creatorflow.db.base import Base
from creatorflow.db.session import get_db
from creatorflow.main import create_app
from creatorflow.services.category_service import CategoryRegistry
from creatorflow.services.change_feed import ChangeFeed
from creatorflow.services.document_store import DocumentStore

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

app = create_app(run_init=False)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def feed():
    return ChangeFeed()


@pytest.fixture
def store(db, feed):
    return DocumentStore(db, feed)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    CategoryRegistry(DocumentStore(db)).ensure_defaults()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/auth/login",
        json={"email": "ops@creatorflow.com", "password": "anything"}
    )
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
