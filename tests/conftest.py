"""
Shared test fixtures.

Each test gets its own in-memory database, created empty,
seeded with the demo user, and dropped afterwards, so no test
sees another test's transfers.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from demo_bank.main import app
from demo_bank.models import Base
from demo_bank.models.base import build_engine, get_db
from demo_bank.seed import seed_demo_data

engine = build_engine("sqlite://")

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)

# Cheap hashes keep seeding fast; the work factor is not under test.
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture(autouse=True)
def setup_database():
    """
    Create all tables before each test, drop them after.

    autouse=True means every test gets this automatically.
    """
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory():
    """Open extra sessions on the test database, e.g. one per thread."""
    return TestSessionLocal


@pytest.fixture
def db_session():
    """Provide a session on a freshly seeded database."""
    session = TestSessionLocal()
    seed_demo_data(session, rounds=TEST_BCRYPT_ROUNDS)
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    We override the get_db dependency so the FastAPI app
    uses our test session instead of the real database.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Log in as the demo user and return the Authorization header."""
    response = client.post("/api/auth/login", json={
        "email": "demo@bank.com",
        "password": "password123",
    })
    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}
