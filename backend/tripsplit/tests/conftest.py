"""
Shared fixtures: an in-memory database wired into the API.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import tripsplit.models  # noqa: F401
from tripsplit.db.base import Base
from tripsplit.db.session import get_db
from tripsplit.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


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
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def trip(client):
    response = client.post("/api/trips", json={"name": "Goa", "currency": "INR"})
    return response.json()


@pytest.fixture
def friends(client, trip):
    """Alice eats everything and drinks, Bob is vegetarian, Carol drinks."""
    people = [
        {"name": "Alice", "is_vegetarian": False, "is_drinker": True},
        {"name": "Bob", "is_vegetarian": True, "is_drinker": False},
        {"name": "Carol", "is_vegetarian": False, "is_drinker": True},
    ]
    return [
        client.post(f"/api/trips/{trip['id']}/friends", json=p).json()
        for p in people
    ]
