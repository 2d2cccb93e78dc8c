"""
models/reservation.py
---------------------
Domain model for guest reservations.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Reservation:
    """
    A reservation as shown in a guest's listing: joined with the reserved
    property's title and price and the property's average rating.
    """
    id: int
    title: str
    cost_per_night: int
    start_date: date
    average_rating: Optional[float] = None
    end_date: Optional[date] = None
    property_id: Optional[int] = None
    guest_id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict) -> "Reservation":
        rating = row.get("average_rating")
        return cls(
            id=row["id"],
            title=row["title"],
            cost_per_night=row["cost_per_night"],
            start_date=row["start_date"],
            average_rating=float(rating) if rating is not None else None,
            end_date=row.get("end_date"),
            property_id=row.get("property_id"),
            guest_id=row.get("guest_id"),
        )

    def __str__(self) -> str:
        return f"#{self.id} {self.title} from {self.start_date}"
