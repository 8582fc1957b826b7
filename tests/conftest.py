"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Seeded companies, jobs and users
- Bearer tokens for a plain user and an admin
"""

import os

# Tables are created per test below, never against the configured server
os.environ.setdefault("CREATE_TABLES", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.models import Company, Job, User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
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
def seed(db_session):
    """
    Seed four companies, three jobs and two users.

    Returns a dict with the job ids keyed "j1", "j2", "j3".
    """
    db_session.add_all([
        Company(handle="c1", name="Apple Corp", description="Desc 1", num_employees=1, logo_url="http://c1.img"),
        Company(handle="c2", name="Bolt Works", description="Desc 2", num_employees=5, logo_url=None),
        Company(handle="c3", name="Cobalt Labs", description="Desc 3", num_employees=10, logo_url=None),
        Company(handle="c4", name="Delta Corp", description="Desc 4", num_employees=12, logo_url=None),
    ])
    db_session.flush()

    j1 = Job(title="Engineer", salary=100000, equity="0.05", company_handle="c1")
    j2 = Job(title="Designer", salary=80000, equity="0", company_handle="c1")
    j3 = Job(title="Analyst", salary=None, equity=None, company_handle="c2")
    db_session.add_all([j1, j2, j3])

    db_session.add_all([
        User(
            username="u1",
            hashed_password=get_password_hash("password1"),
            first_name="U1F",
            last_name="U1L",
            email="u1@example.com",
            is_admin=False,
        ),
        User(
            username="admin",
            hashed_password=get_password_hash("password2"),
            first_name="AdF",
            last_name="AdL",
            email="admin@example.com",
            is_admin=True,
        ),
    ])
    db_session.commit()

    return {"j1": j1.id, "j2": j2.id, "j3": j3.id}


@pytest.fixture
def u1_token():
    """Token for the plain user u1"""
    return create_access_token("u1", False)


@pytest.fixture
def admin_token():
    """Token for the admin user"""
    return create_access_token("admin", True)


@pytest.fixture
def u1_headers(u1_token):
    return {"Authorization": f"Bearer {u1_token}"}


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
