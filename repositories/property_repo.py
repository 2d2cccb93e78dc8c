"""
repositories/property_repo.py
------------------------------
Data access layer for property listings.
All SQL queries related to the `properties` table live here.
"""

from config import DEFAULT_SEARCH_LIMIT
from models.property import PROPERTY_COLUMNS, Property
from models.search import PropertySearchOptions
from repositories.base import BaseRepository
from repositories.query_builder import build_property_search
from utils.logger import get_logger

logger = get_logger(__name__)


class PropertyRepository(BaseRepository):
    """Repository for searching and inserting properties."""

    # ── READ ──────────────────────────────────────────────

    def get_all_properties(
        self, options: PropertySearchOptions, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[Property]:
        """
        Search properties, cheapest first.

        Args:
            options: Filters to apply (city, owner, price range, minimum rating).
            limit: Maximum number of results.

        Returns:
            Matching properties with `average_rating` set. Empty if none match.
        """
        sql, params = build_property_search(options, limit)
        logger.debug(f"Property search: {sql} {params}")
        rows = self._fetch_all("search properties", sql, params)
        return [Property.from_row(r) for r in rows]

    # ── CREATE ────────────────────────────────────────────

    def add_property(self, prop: Property) -> Property:
        """
        Insert a new property.

        Args:
            prop: The Property to persist.

        Returns:
            The stored Property with its generated `id`.
        """
        columns = ", ".join(PROPERTY_COLUMNS)
        placeholders = ", ".join(["%s"] * len(PROPERTY_COLUMNS))
        sql = f"""
            INSERT INTO properties ({columns})
            VALUES ({placeholders})
            RETURNING *;
        """
        row = self._fetch_one("add property", sql, prop.insert_values(), commit=True)
        saved = Property.from_row(row)
        logger.info(f"Added property #{saved.id} '{saved.title}' for owner {saved.owner_id}")
        return saved
