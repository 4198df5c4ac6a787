"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- Seed companies and jobs
- FastAPI test client
- Auth headers for admin and regular users
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.core.database import Base, get_db
from jobly.core.security import create_access_token
from jobly.models import Company
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite leaves FK enforcement off unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


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
def job_ids(db_session):
    """
    Seed three companies and four jobs; return the job ids in title order.

    job4 has neither salary nor equity.
    """
    db_session.add_all([
        Company(handle=f"c{i}", name=f"C{i}", description=f"Desc{i}",
                num_employees=i, logo_url=f"http://c{i}.img")
        for i in (1, 2, 3)
    ])
    db_session.commit()

    ids = []
    for title, salary, equity, handle in [
        ("job1", 100, "1", "c1"),
        ("job2", 1, "0.1", "c2"),
        ("job3", 200, "0", "c3"),
        ("job4", None, None, "c1"),
    ]:
        row = db_session.execute(
            text("""INSERT INTO jobs (title, salary, equity, company_handle)
                    VALUES (:title, :salary, :equity, :handle)
                    RETURNING id"""),
            {"title": title, "salary": salary, "equity": equity, "handle": handle},
        ).one()
        ids.append(row.id)
    db_session.commit()

    return ids


@pytest.fixture
def admin_headers():
    """Bearer header for an admin user"""
    token = create_access_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    """Bearer header for a logged-in, non-admin user"""
    token = create_access_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}
