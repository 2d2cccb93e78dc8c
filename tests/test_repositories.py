"""
Tests for repository classes.
Uses the fake_db fixture in place of a live PostgreSQL connection.
"""

from datetime import date

import psycopg2
import pytest

from models.search import PropertySearchOptions
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository
from tests.conftest import PropertyFactory, UserFactory
from utils.exceptions import InvalidInputError, QueryFailedError


class TestUserRepository:
    """Test user lookups and inserts."""

    def test_get_user_with_email(self, fake_db):
        fake_db.rows = [{"id": 1, "name": "Ann", "email": "ann@example.com", "password": "pw"}]

        user = UserRepository().get_user_with_email("ann@example.com")

        assert user.id == 1
        assert user.email == "ann@example.com"
        assert "WHERE email = %s" in fake_db.last_sql
        assert fake_db.last_params == ["ann@example.com"]
        assert fake_db.released == 1

    def test_get_user_with_email_not_found(self, fake_db):
        assert UserRepository().get_user_with_email("nobody@example.com") is None
        assert fake_db.released == 1

    def test_get_user_with_id(self, fake_db):
        fake_db.rows = [{"id": 9, "name": "Bo", "email": "bo@example.com", "password": "pw"}]

        user = UserRepository().get_user_with_id(9)

        assert user.name == "Bo"
        assert "WHERE id = %s" in fake_db.last_sql
        assert fake_db.last_params == [9]

    def test_get_user_with_id_not_found(self, fake_db):
        assert UserRepository().get_user_with_id(404) is None

    def test_add_user(self, fake_db):
        saved = UserRepository().add_user(UserFactory.build(email="new@example.com"))

        assert saved.id == 1
        assert saved.email == "new@example.com"
        assert "RETURNING *" in fake_db.last_sql
        assert fake_db.last_params == ["Devin Sanders", "new@example.com", "password"]
        assert fake_db.conn.commits == 1

    def test_lookup_failure_raises(self, fake_db):
        fake_db.error = psycopg2.OperationalError("connection lost")

        with pytest.raises(QueryFailedError) as exc_info:
            UserRepository().get_user_with_email("ann@example.com")

        assert exc_info.value.cause is fake_db.error
        assert exc_info.value.__cause__ is fake_db.error
        assert fake_db.conn.rollbacks == 1
        assert fake_db.released == 1

    def test_insert_failure_does_not_commit(self, fake_db):
        fake_db.error = psycopg2.IntegrityError("duplicate key")

        with pytest.raises(QueryFailedError):
            UserRepository().add_user(UserFactory.build())

        assert fake_db.conn.commits == 0
        assert fake_db.conn.rollbacks == 1


class TestReservationRepository:
    """Test reservation listing."""

    def test_returns_every_row(self, fake_db):
        fake_db.rows = [
            {"id": 1, "title": "Cabin", "cost_per_night": 9000,
             "start_date": date(2018, 9, 11), "end_date": date(2018, 9, 26),
             "property_id": 1, "guest_id": 1, "average_rating": 4},
            {"id": 2, "title": "Loft", "cost_per_night": 12000,
             "start_date": date(2019, 1, 4), "end_date": date(2019, 2, 1),
             "property_id": 2, "guest_id": 1, "average_rating": 3},
        ]

        reservations = ReservationRepository().get_all_reservations(1, limit=5)

        assert [r.id for r in reservations] == [1, 2]
        assert reservations[1].title == "Loft"
        assert fake_db.last_params == [1, 5]
        assert "ORDER BY reservations.start_date" in fake_db.last_sql

    def test_default_limit(self, fake_db):
        ReservationRepository().get_all_reservations(3)
        assert fake_db.last_params == [3, 10]

    @pytest.mark.parametrize("limit", [0, -3, 1.5, True])
    def test_invalid_limit_rejected_before_query(self, fake_db, limit):
        with pytest.raises(InvalidInputError):
            ReservationRepository().get_all_reservations(1, limit=limit)
        assert fake_db.executed == []

    def test_no_reservations(self, fake_db):
        assert ReservationRepository().get_all_reservations(1) == []

    def test_failure_raises(self, fake_db):
        fake_db.error = psycopg2.ProgrammingError("bad column")

        with pytest.raises(QueryFailedError) as exc_info:
            ReservationRepository().get_all_reservations(1)

        assert exc_info.value.operation == "get reservations"
        assert fake_db.released == 1


class TestPropertyRepository:
    """Test property search and insert."""

    def test_search_binds_builder_params(self, fake_db):
        row = PropertyFactory.build_data(city="Vancouver")
        row.update(id=4, average_rating=4.5)
        fake_db.rows = [row]

        results = PropertyRepository().get_all_properties(PropertySearchOptions(city="van"), 10)

        assert len(results) == 1
        assert results[0].id == 4
        assert results[0].average_rating == 4.5
        assert fake_db.last_params == ["%van%", 10]
        assert fake_db.last_sql.count("%s") == len(fake_db.last_params)

    def test_search_no_matches(self, fake_db):
        assert PropertyRepository().get_all_properties(PropertySearchOptions(), 5) == []
        assert fake_db.last_params == [5]

    def test_search_failure_raises(self, fake_db):
        fake_db.error = psycopg2.OperationalError("timeout")

        with pytest.raises(QueryFailedError):
            PropertyRepository().get_all_properties(PropertySearchOptions())

    def test_add_property(self, fake_db):
        prop = PropertyFactory.build()

        saved = PropertyRepository().add_property(prop)

        assert saved.id == 1
        assert saved.title == prop.title
        assert saved.cost_per_night == prop.cost_per_night
        assert fake_db.last_sql.count("%s") == 14
        assert fake_db.last_params == list(prop.insert_values())
        assert fake_db.conn.commits == 1

    def test_add_property_ids_are_distinct(self, fake_db):
        repo = PropertyRepository()

        ids = [repo.add_property(PropertyFactory.build(title=f"Home {i}")).id for i in range(3)]

        assert len(set(ids)) == 3
