"""
models/property.py
------------------
Domain model for rental property listings.
"""

from dataclasses import dataclass
from typing import Optional

# Columns written by an insert, in placeholder order.
PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province",
    "post_code",
)


@dataclass
class Property:
    """
    Represents a single listing.

    Attributes:
        owner_id: The user who owns the listing.
        cost_per_night: Nightly price in integer cents.
        average_rating: Mean review rating; only set on search results.
    """
    owner_id: int
    title: str
    description: Optional[str]
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str
    street: str
    city: str
    province: str
    post_code: str
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @property
    def price_per_night(self) -> float:
        """Nightly price in dollars."""
        return self.cost_per_night / 100

    def insert_values(self) -> tuple:
        """Values for PROPERTY_COLUMNS, in order."""
        return tuple(getattr(self, column) for column in PROPERTY_COLUMNS)

    @classmethod
    def from_row(cls, row: dict) -> "Property":
        rating = row.get("average_rating")
        return cls(
            id=row["id"],
            average_rating=float(rating) if rating is not None else None,
            **{column: row[column] for column in PROPERTY_COLUMNS},
        )

    def __str__(self) -> str:
        rating = f"{self.average_rating:.2f}" if self.average_rating is not None else "n/a"
        return f"#{self.id} {self.title} | {self.city} | ${self.price_per_night:.2f}/night | rating {rating}"
