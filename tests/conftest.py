import os

# Settings are read at import time; configure before importing the app
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("DEBUG", "true")

import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from travel_admin.database import get_db
from travel_admin.models import Base
from travel_admin.config import settings
# Import FastAPI app AFTER model imports
from travel_admin.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TENANT_A = "business-a"
TENANT_B = "business-b"


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sql_statements(client):
    """SQL statements sent to the test database once the schema exists"""
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", record)
    yield statements
    event.remove(engine, "before_cursor_execute", record)


def create_test_token(
    user_id: str | None = "test-user-123",
    business_id: str | None = None,
    user_type: str = "business_user",
    business_info_id: str | None = None,
    expired: bool = False,
    **extra_claims,
) -> str:
    """
    Generate valid JWT token for testing.

    Args:
        user_id: User ID to embed in 'sub' claim (None omits it)
        business_id: Top-level 'businessId' claim
        user_type: 'userType' claim
        business_info_id: Nested 'businessInfo.businessId' claim
        expired: If True, create expired token

    Returns:
        Encoded JWT token
    """
    if expired:
        exp = datetime.now(UTC) - timedelta(minutes=5)
    else:
        exp = datetime.now(UTC) + timedelta(minutes=15)

    payload = {"exp": exp, "iat": datetime.now(UTC), "userType": user_type}
    if user_id is not None:
        payload["sub"] = user_id
    if business_id is not None:
        payload["businessId"] = business_id
    if business_info_id is not None:
        payload["businessInfo"] = {"businessId": business_info_id}
    payload.update(extra_claims)

    return jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    """Authorization headers for a business user in tenant A"""
    return bearer(create_test_token(user_id="user-a", business_id=TENANT_A))


@pytest.fixture
def tenant_a_headers(auth_headers):
    return auth_headers


@pytest.fixture
def tenant_b_headers():
    """Authorization headers for a business user in tenant B"""
    return bearer(create_test_token(user_id="user-b", business_id=TENANT_B))


@pytest.fixture
def super_admin_headers():
    """Authorization headers for the elevated role (no tenant of its own)"""
    return bearer(create_test_token(user_id="root-admin", user_type="super_admin"))


def sample_bank(**overrides) -> dict:
    data = {
        "name": "X",
        "accountNumber": "1",
        "ifscCode": "Y",
        "accountType": "savings",
    }
    data.update(overrides)
    return data


def sample_traveller(**overrides) -> dict:
    data = {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "phone": "+91 9876543210",
        "dateOfBirth": "1990-05-17",
        "ownerId": "team-member-1",
    }
    data.update(overrides)
    return data
