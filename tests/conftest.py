"""
Pytest configuration and shared fixtures for the test suite.
Points the app at an in-memory database before anything from malasngoding is imported.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "malasngoding-test-logs"))
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# ----- In-memory DB (for tests that need DB without touching real DB) -----
@pytest.fixture
def in_memory_engine():
    """One shared connection so every session sees the same in-memory database."""
    return create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def session_factory(in_memory_engine):
    import malasngoding.models  # noqa: F401
    from malasngoding.config import Base
    Base.metadata.create_all(in_memory_engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=in_memory_engine)


@pytest.fixture
def db_session(session_factory):
    """Empty schema, no reference data."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seeded_db(db_session):
    """Session over the built-in languages, modules, lessons, challenge and badges (no demo users)."""
    from malasngoding.services.seed_service import seed_reference_data
    seed_reference_data(db_session, with_demo_users=False)
    return db_session


@pytest.fixture
def test_user(seeded_db):
    from malasngoding.models.models import User
    user = User(username="budi", hashed_password="x", email="budi@example.com")
    seeded_db.add(user)
    seeded_db.commit()
    seeded_db.refresh(user)
    return user
