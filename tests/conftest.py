import os

# Settings are read at import time; provide a signing key before importing the app
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import get_settings
from app.core.security import create_access_token
from app.database import get_db, enable_sqlite_foreign_keys
from app.models.base import Base
# Import all model classes to ensure they're registered with SQLAlchemy
from app.models.tenant import Tenant
from app.models.user import User
from app.models.note import Note  # noqa: F401
from app.seed import seed
# Import FastAPI app AFTER model imports
from app.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


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
def settings():
    return get_settings()


@pytest.fixture
def tenants(db_session) -> dict[str, Tenant]:
    """Seed Acme and Globex (FREE plan, one admin + one member each)"""
    return {tenant.slug: tenant for tenant in seed(db_session)}


def get_user(db_session, email: str) -> User:
    return db_session.query(User).filter(User.email == email).one()


def create_test_token(
    user: User, expired: bool = False, issued_at: datetime | None = None
) -> str:
    """
    Generate an access token for testing.

    Args:
        user: User whose identity goes into the token
        expired: If True, issue the token just over 7 days ago
        issued_at: Explicit issuance time (overrides expired)

    Returns:
        Encoded JWT token
    """
    settings = get_settings()
    if issued_at is None and expired:
        issued_at = datetime.now(UTC) - timedelta(
            days=settings.ACCESS_TOKEN_EXPIRE_DAYS, minutes=5
        )
    return create_access_token(user, settings, issued_at=issued_at)


def headers_for(user: User, **kwargs) -> dict[str, str]:
    """Authorization headers carrying a token for user"""
    return {"Authorization": f"Bearer {create_test_token(user, **kwargs)}"}


@pytest.fixture
def acme_admin_headers(db_session, tenants):
    return headers_for(get_user(db_session, "admin@acme.test"))


@pytest.fixture
def acme_member_headers(db_session, tenants):
    return headers_for(get_user(db_session, "user@acme.test"))


@pytest.fixture
def globex_admin_headers(db_session, tenants):
    return headers_for(get_user(db_session, "admin@globex.test"))


@pytest.fixture
def globex_member_headers(db_session, tenants):
    return headers_for(get_user(db_session, "user@globex.test"))
