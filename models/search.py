"""
models/search.py
----------------
Filter options accepted by the property search.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from utils.exceptions import InvalidInputError


@dataclass
class PropertySearchOptions:
    """
    Sparse set of property search filters. Any field left as None is not applied.

    Attributes:
        city: Substring matched against the property's city.
        owner_id: Only properties owned by this user.
        minimum_price_per_night: Lower price bound in dollars.
        maximum_price_per_night: Upper price bound in dollars.
        minimum_rating: Lower bound on the average review rating.

    The price range is only applied when both bounds are set.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = None
    maximum_price_per_night: Optional[float] = None
    minimum_rating: Optional[float] = None

    @property
    def has_price_range(self) -> bool:
        return (
            self.minimum_price_per_night is not None
            and self.maximum_price_per_night is not None
        )

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> "PropertySearchOptions":
        """
        Build options from raw query-string values.

        Blank or missing values are treated as absent. Unknown keys are ignored.

        Raises:
            InvalidInputError: If a numeric option cannot be parsed.
        """
        city = query.get("city")
        if isinstance(city, str):
            city = city.strip() or None
        return cls(
            city=city,
            owner_id=_coerce(query, "owner_id", int),
            minimum_price_per_night=_coerce(query, "minimum_price_per_night", _finite_float),
            maximum_price_per_night=_coerce(query, "maximum_price_per_night", _finite_float),
            minimum_rating=_coerce(query, "minimum_rating", _finite_float),
        )


def _finite_float(value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def _coerce(query: Mapping[str, Any], key: str, convert: Callable[[Any], Any]) -> Any:
    value = query.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return convert(value)
    except (TypeError, ValueError):
        raise InvalidInputError(key, value) from None
