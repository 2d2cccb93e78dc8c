"""
Pytest configuration and fixtures for the data layer tests.
Replaces the pooled psycopg2 connection with an in-memory fake so that
repositories can be exercised without a running PostgreSQL server.
"""

from itertools import count
from typing import Any, Dict, List, Optional
from unittest.mock import patch

import pytest

from models.property import PROPERTY_COLUMNS, Property
from models.user import User


class FakeCursor:
    """Cursor stand-in that records statements and serves queued rows."""

    def __init__(self, db: "FakeDatabase"):
        self.db = db

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql: str, params=None):
        params = list(params or [])
        self.db.executed.append((sql, params))
        if self.db.error is not None:
            raise self.db.error
        if "INSERT INTO properties" in sql:
            self.db.rows = [self.db.insert_row(PROPERTY_COLUMNS, params)]
        elif "INSERT INTO users" in sql:
            self.db.rows = [self.db.insert_row(("name", "email", "password"), params)]

    def fetchone(self) -> Optional[Dict[str, Any]]:
        return self.db.rows.pop(0) if self.db.rows else None

    def fetchall(self) -> List[Dict[str, Any]]:
        rows, self.db.rows = self.db.rows, []
        return rows


class FakeConnection:
    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakeDatabase:
    """Holds the fake connection state shared by one test."""

    def __init__(self):
        self.conn = FakeConnection()
        self.executed: List[tuple] = []
        self.rows: List[Dict[str, Any]] = []
        self.error: Optional[Exception] = None
        self.released = 0
        self._ids = count(1)

    def insert_row(self, columns, params) -> Dict[str, Any]:
        """Emulate a SERIAL primary key for INSERT ... RETURNING *."""
        row = dict(zip(columns, params))
        row["id"] = next(self._ids)
        return row

    def release(self, conn):
        assert conn is self.conn
        self.released += 1

    @property
    def last_sql(self) -> str:
        return self.executed[-1][0]

    @property
    def last_params(self) -> list:
        return self.executed[-1][1]


@pytest.fixture
def fake_db():
    """Patch the repository layer's pool access with a FakeDatabase."""
    db = FakeDatabase()
    with patch("repositories.base.get_connection", return_value=db.conn), \
            patch("repositories.base.release_connection", side_effect=db.release), \
            patch("repositories.base.dict_cursor", side_effect=lambda conn: FakeCursor(db)):
        yield db


class UserFactory:
    """Factory for building test users."""

    @staticmethod
    def build(**overrides) -> User:
        data = {
            "name": "Devin Sanders",
            "email": "sebastianguerra@ymail.com",
            "password": "password",
        }
        data.update(overrides)
        return User(**data)


class PropertyFactory:
    """Factory for building test properties."""

    @staticmethod
    def build_data(**overrides) -> Dict[str, Any]:
        data = {
            "owner_id": 1,
            "title": "Speed lamp",
            "description": "description",
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": 93061,
            "parking_spaces": 6,
            "number_of_bathrooms": 4,
            "number_of_bedrooms": 8,
            "country": "Canada",
            "street": "536 Namsub Highway",
            "city": "Sotboske",
            "province": "Quebec",
            "post_code": "28142",
        }
        data.update(overrides)
        return data

    @staticmethod
    def build(**overrides) -> Property:
        return Property(**PropertyFactory.build_data(**overrides))
