"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
Reservations are only read here, joined with their property and its reviews.
"""

from config import DEFAULT_RESERVATION_LIMIT
from models.reservation import Reservation
from repositories.base import BaseRepository
from repositories.query_builder import check_limit
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository(BaseRepository):
    """Repository for reading a guest's reservations."""

    def get_all_reservations(self, guest_id: int, limit: int = DEFAULT_RESERVATION_LIMIT) -> list[Reservation]:
        """
        Get all reservations for a single guest.

        Args:
            guest_id: The id of the guest user.
            limit: Maximum number of reservations to return.

        Returns:
            Reservations ordered by start date, each carrying the property's
            title, nightly cost and average rating. Empty if none.

        Raises:
            InvalidInputError: If limit is not a positive integer.
        """
        check_limit(limit)
        sql = """
            SELECT reservations.id, reservations.property_id, reservations.guest_id,
                   reservations.start_date, reservations.end_date,
                   properties.title, properties.cost_per_night,
                   avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        rows = self._fetch_all("get reservations", sql, (guest_id, limit))
        logger.debug(f"Found {len(rows)} reservations for guest {guest_id}")
        return [Reservation.from_row(r) for r in rows]
