"""
repositories/query_builder.py
-----------------------------
Builds the filtered property search query.

Predicates are collected in a PredicateList and rendered in one pass, so the
WHERE/AND keywords depend only on how many predicates exist, never on how many
parameters were bound before them.
"""

import math

from utils.exceptions import InvalidInputError
from models.search import PropertySearchOptions

PLACEHOLDER = "%s"

_SEARCH_SELECT = (
    "SELECT properties.*, avg(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)


class PredicateList:
    """Ordered list of (sql_fragment, params) pairs."""

    def __init__(self):
        self._items: list[tuple[str, tuple]] = []

    def add(self, fragment: str, *params) -> "PredicateList":
        """
        Append one predicate.

        Raises:
            ValueError: If the fragment's placeholder count differs from len(params).
        """
        if fragment.count(PLACEHOLDER) != len(params):
            raise ValueError(
                f"Predicate {fragment!r} has {fragment.count(PLACEHOLDER)} "
                f"placeholders but {len(params)} params"
            )
        self._items.append((fragment, params))
        return self

    def render(self, keyword: str) -> str:
        """Render as '<keyword> p1 AND p2 ...', or '' when empty."""
        if not self._items:
            return ""
        return f"{keyword} " + " AND ".join(fragment for fragment, _ in self._items)

    @property
    def params(self) -> list:
        return [param for _, params in self._items for param in params]

    def __len__(self) -> int:
        return len(self._items)


def check_limit(limit) -> int:
    """Return `limit` if it is a positive int, else raise InvalidInputError."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidInputError("limit", limit)
    return limit


def _to_cents(field: str, dollars: float) -> int:
    if not math.isfinite(dollars):
        raise InvalidInputError(field, dollars)
    return int(round(dollars * 100))


def build_property_search(options: PropertySearchOptions, limit: int) -> tuple[str, list]:
    """
    Compose the property search SELECT and its parameter list.

    Args:
        options: Filters to apply; absent fields are skipped.
        limit: Maximum number of rows, bound as the final parameter.

    Returns:
        (sql, params) where params lines up with the placeholders in sql.

    Raises:
        InvalidInputError: If limit is not a positive integer or a price
            bound is not finite.
    """
    check_limit(limit)

    where = PredicateList()
    if options.city:
        where.add("properties.city LIKE %s", f"%{options.city}%")
    if options.owner_id is not None:
        where.add("properties.owner_id = %s", options.owner_id)
    if options.has_price_range:
        where.add(
            "properties.cost_per_night >= %s AND properties.cost_per_night <= %s",
            _to_cents("minimum_price_per_night", options.minimum_price_per_night),
            _to_cents("maximum_price_per_night", options.maximum_price_per_night),
        )

    having = PredicateList()
    if options.minimum_rating is not None:
        having.add("avg(property_reviews.rating) >= %s", options.minimum_rating)

    clauses = [_SEARCH_SELECT]
    if where:
        clauses.append(where.render("WHERE"))
    clauses.append("GROUP BY properties.id")
    if having:
        clauses.append(having.render("HAVING"))
    clauses.append("ORDER BY properties.cost_per_night")
    clauses.append("LIMIT %s")

    sql = "\n".join(clauses) + ";"
    params = where.params + having.params + [limit]
    return sql, params
