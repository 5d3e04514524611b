"""
Unit test fixtures. No server; DB-backed services run against the in-memory session from the root conftest.
"""
from datetime import datetime

import pytest

from malasngoding.journal.storage import JsonFileStorage
from malasngoding.journal.store import ComplaintStore
from malasngoding.schemas.complaint_schemas import Complaint, Feeling

# Monday 4 March 2024, mid afternoon.
NOW = datetime(2024, 3, 4, 15, 0, 0)


class FixedClock:
    """Callable clock the store uses for createdAt; tests move it by assigning .now."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / "storage.json"


@pytest.fixture
def store(storage_path, clock):
    return ComplaintStore(JsonFileStorage(storage_path), clock=clock)


@pytest.fixture
def make_complaint():
    counter = {"n": 0}

    def _make(feeling: Feeling, created_at: datetime = NOW, text: str = "hari yang panjang") -> Complaint:
        counter["n"] += 1
        return Complaint(id=f"c{counter['n']}", text=text, feeling=feeling, created_at=created_at)

    return _make


@pytest.fixture
def now():
    return NOW
