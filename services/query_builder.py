"""
Query builder for statements whose shape depends on which inputs are present.

Predicates are kept as an ordered list of (fragment, values) pairs. A
fragment marks each bound value with `?`; placeholders are only numbered
when the statement is rendered, so `$n` is always the 1-based position of
its value in the returned parameter list, whichever optional pieces were
skipped along the way.

Example:
     builder = QueryBuilder("SELECT * FROM properties")
     builder.where("city LIKE ?", "%Van%")
     builder.where("owner_id = ?", 3)
     builder.limit(10)
     builder.build()
     # SqlStatement(text="SELECT * FROM properties WHERE city LIKE $1 AND owner_id = $2 LIMIT $3",
     #              params=["%Van%", 3, 10])
"""
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple, Union, Mapping

from schemas import PropertySearchFilters, parse_input


MARKER = "?"
DEFAULT_LIMIT = 10

Fragment = Tuple[str, Tuple[Any, ...]]


class SqlStatement(NamedTuple):
     """A rendered statement and its positional parameters."""
     text: str
     params: List[Any]


def _check(fragment: str, values: Sequence[Any]) -> Fragment:
     if fragment.count(MARKER) != len(values):
          raise ValueError(
               f"Fragment {fragment!r} has {fragment.count(MARKER)} markers but {len(values)} values"
          )
     return fragment, tuple(values)


class QueryBuilder:
     """Assembles a SELECT with optional WHERE / HAVING predicates joined by AND."""

     def __init__(self, base: str):
          self._base = base.strip()
          self._where: List[Fragment] = []
          self._group_by: Optional[str] = None
          self._having: List[Fragment] = []
          self._order_by: Optional[str] = None
          self._limit: Optional[Fragment] = None

     def where(self, fragment: str, *values: Any) -> "QueryBuilder":
          self._where.append(_check(fragment, values))
          return self

     def group_by(self, columns: str) -> "QueryBuilder":
          self._group_by = columns
          return self

     def having(self, fragment: str, *values: Any) -> "QueryBuilder":
          self._having.append(_check(fragment, values))
          return self

     def order_by(self, clause: str) -> "QueryBuilder":
          self._order_by = clause
          return self

     def limit(self, count: int) -> "QueryBuilder":
          self._limit = _check(MARKER, (count,))
          return self

     def _clauses(self) -> List[Tuple[str, List[Fragment]]]:
          clauses: List[Tuple[str, List[Fragment]]] = [("", [(self._base, ())])]
          if self._where:
               clauses.append(("WHERE", self._where))
          if self._group_by:
               clauses.append(("GROUP BY", [(self._group_by, ())]))
          if self._having:
               clauses.append(("HAVING", self._having))
          if self._order_by:
               clauses.append(("ORDER BY", [(self._order_by, ())]))
          if self._limit:
               clauses.append(("LIMIT", [self._limit]))
          return clauses

     def build(self) -> SqlStatement:
          params: List[Any] = []
          parts: List[str] = []
          for keyword, fragments in self._clauses():
               rendered = [render(fragment, values, params) for fragment, values in fragments]
               body = " AND ".join(rendered)
               parts.append(f"{keyword} {body}" if keyword else body)
          return SqlStatement(" ".join(parts), params)


def render(fragment: str, values: Sequence[Any], params: List[Any]) -> str:
     """Replace each marker with `$n`, appending its value to `params`."""
     pieces = fragment.split(MARKER)
     out = [pieces[0]]
     for value, piece in zip(values, pieces[1:]):
          params.append(value)
          out.append(f"${len(params)}{piece}")
     return "".join(out)


def build_update(
     table: str,
     assignments: Sequence[Tuple[str, Any]],
     key_column: str,
     key_value: Any,
     returning: str = "*",
) -> SqlStatement:
     """
     Render `UPDATE <table> SET ... WHERE <key> = $n RETURNING ...`.

     Only the assignments passed in are set; callers drop absent fields.

     Raises:
          ValueError: If there is nothing to update
     """
     if not assignments:
          raise ValueError("No fields to update")
     params: List[Any] = []
     sets = ", ".join(render(f"{column} = ?", (value,), params) for column, value in assignments)
     where = render(f"{key_column} = ?", (key_value,), params)
     statement = f"UPDATE {table} SET {sets} WHERE {where}"
     if returning:
          statement += f" RETURNING {returning}"
     return SqlStatement(statement, params)


# ---------------------------------------------------------------------------
# Property search
# ---------------------------------------------------------------------------

PROPERTY_SEARCH_BASE = """
SELECT properties.*, AVG(property_reviews.rating) AS average_rating, COUNT(property_reviews.rating) AS review_count
FROM properties
JOIN property_reviews ON properties.id = property_reviews.property_id
"""


def to_cents(amount: float) -> int:
     return int(round(amount * 100))


def build_property_search(
     filters: Union[PropertySearchFilters, Mapping[str, Any], None] = None,
     limit: int = DEFAULT_LIMIT,
) -> SqlStatement:
     """
     Build the filtered property search.

     Properties without any review drop out of the inner join. The price
     range applies only when both bounds are set; a lone bound is ignored.
     The rating threshold filters on the aggregated average.
     """
     filters = parse_input(PropertySearchFilters, filters)
     query = QueryBuilder(PROPERTY_SEARCH_BASE)

     if filters.city:
          query.where("city LIKE ?", f"%{filters.city}%")

     if filters.owner_id is not None:
          query.where("owner_id = ?", filters.owner_id)

     if filters.has_price_range:
          query.where(
               "(properties.cost_per_night > ? AND properties.cost_per_night < ?)",
               to_cents(filters.minimum_price_per_night),
               to_cents(filters.maximum_price_per_night),
          )

     query.group_by("properties.id")

     if filters.minimum_rating is not None:
          query.having("AVG(property_reviews.rating) >= ?", filters.minimum_rating)

     query.order_by("cost_per_night")
     query.limit(limit)
     return query.build()
