"""
services/property_service.py
-----------------------------
Business logic for searching and creating property listings.
Turns loosely-typed input (query strings, form fields) into domain objects
and hands them to the PropertyRepository.
"""

import math
from typing import Any, Mapping, Optional

from config import DEFAULT_SEARCH_LIMIT
from models.property import Property
from models.search import PropertySearchOptions
from repositories.property_repo import PropertyRepository
from repositories.query_builder import check_limit
from utils.exceptions import InvalidInputError
from utils.logger import get_logger

logger = get_logger(__name__)


class PropertyService:
    """Handles property search and listing creation."""

    def __init__(self, repo: Optional[PropertyRepository] = None):
        self.repo = repo or PropertyRepository()

    def search(self, raw_query: Mapping[str, Any], limit: Optional[int] = None) -> list[Property]:
        """
        Search properties from raw query-string values.

        Args:
            raw_query: e.g. {"city": "van", "minimum_price_per_night": "50"}.
            limit: Maximum results; defaults to DEFAULT_SEARCH_LIMIT.

        Raises:
            InvalidInputError: If an option or the limit is invalid.
            QueryFailedError: If the query fails.
        """
        options = PropertySearchOptions.from_query(raw_query)
        results = self.repo.get_all_properties(
            options, check_limit(DEFAULT_SEARCH_LIMIT if limit is None else limit)
        )
        logger.info(f"Property search returned {len(results)} results")
        return results

    def create_listing(self, owner_id: int, fields: Mapping[str, Any]) -> Property:
        """
        Create a listing owned by `owner_id`.

        `fields` carries the descriptive and address fields, plus either
        `cost_per_night` in cents or `price_per_night` in dollars.
        Room counts default to 0.

        Raises:
            InvalidInputError: If a required field is missing or malformed.
        """
        if "cost_per_night" in fields:
            cost = _as_int(fields, "cost_per_night")
        elif "price_per_night" in fields:
            price = fields["price_per_night"]
            try:
                dollars = float(price)
            except (TypeError, ValueError):
                raise InvalidInputError("price_per_night", price) from None
            if not math.isfinite(dollars):
                raise InvalidInputError("price_per_night", price)
            cost = int(round(dollars * 100))
        else:
            raise InvalidInputError("price_per_night", None)

        try:
            prop = Property(
                owner_id=owner_id,
                title=fields["title"],
                description=fields.get("description"),
                thumbnail_photo_url=fields["thumbnail_photo_url"],
                cover_photo_url=fields["cover_photo_url"],
                cost_per_night=cost,
                parking_spaces=_as_int(fields, "parking_spaces"),
                number_of_bathrooms=_as_int(fields, "number_of_bathrooms"),
                number_of_bedrooms=_as_int(fields, "number_of_bedrooms"),
                country=fields["country"],
                street=fields["street"],
                city=fields["city"],
                province=fields["province"],
                post_code=fields["post_code"],
            )
        except KeyError as e:
            raise InvalidInputError(e.args[0], None) from None
        return self.repo.add_property(prop)


def _as_int(fields: Mapping[str, Any], key: str) -> int:
    """Whole-number field; floats with a fractional part are rejected, not truncated."""
    value = fields.get(key, 0)
    if isinstance(value, bool):
        raise InvalidInputError(key, value)
    if isinstance(value, float) and not value.is_integer():
        raise InvalidInputError(key, value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidInputError(key, value) from None
