"""
services/reservation_service.py
--------------------------------
Lists a guest's reservations.
"""

from typing import Optional

from config import DEFAULT_RESERVATION_LIMIT
from models.reservation import Reservation
from repositories.query_builder import check_limit
from repositories.reservation_repo import ReservationRepository


class ReservationService:
    """Thin wrapper over ReservationRepository applying the default limit."""

    def __init__(self, repo: Optional[ReservationRepository] = None):
        self.repo = repo or ReservationRepository()

    def for_guest(self, guest_id: int, limit: Optional[int] = None) -> list[Reservation]:
        if limit is None:
            limit = DEFAULT_RESERVATION_LIMIT
        return self.repo.get_all_reservations(guest_id, check_limit(limit))
