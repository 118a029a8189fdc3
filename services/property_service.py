"""
Property Service - filtered listing search and listing creation.
"""
import logging
from typing import Any, Dict, List, Mapping, Union

from sqlalchemy.orm import Session

from database import execute, fetch_all
from schemas import PropertyCreate, PropertySearchFilters, parse_input
from .query_builder import DEFAULT_LIMIT, build_property_search

logger = logging.getLogger(__name__)

PROPERTY_COLUMNS = (
     "owner_id",
     "title",
     "description",
     "thumbnail_photo_url",
     "cover_photo_url",
     "cost_per_night",
     "street",
     "city",
     "province",
     "post_code",
     "country",
     "parking_spaces",
     "number_of_bathrooms",
     "number_of_bedrooms",
)


def get_all_properties(
     db: Session,
     filters: Union[PropertySearchFilters, Mapping[str, Any], None] = None,
     limit: int = DEFAULT_LIMIT,
) -> List[Dict[str, Any]]:
     """
     Search reviewed properties, cheapest first.

     Args:
          db: SQLAlchemy database session
          filters: city / owner_id / price range (whole units) / minimum_rating
          limit: Maximum number of rows (default: 10)

     Returns:
          Property rows with `average_rating` and `review_count`
     """
     statement = build_property_search(filters, limit)
     logger.debug("Property search: %s", statement.text, extra={"params": statement.params})
     return fetch_all(db, statement.text, statement.params, operation="get_all_properties")


def add_property(db: Session, property: Union[PropertyCreate, Mapping[str, Any]]) -> Dict[str, Any]:
     """
     Add a listing. `cost_per_night` must already be in cents.

     Returns:
          The inserted row

     Raises:
          ConstraintViolationError: If owner_id does not reference a user
     """
     property = parse_input(PropertyCreate, property)
     placeholders = ", ".join(f"${i}" for i in range(1, len(PROPERTY_COLUMNS) + 1))
     statement = (
          f"INSERT INTO properties ({', '.join(PROPERTY_COLUMNS)}) "
          f"VALUES ({placeholders}) RETURNING *"
     )
     row = execute(
          db,
          statement,
          [getattr(property, column) for column in PROPERTY_COLUMNS],
          operation="add_property",
     ).mappings().first()
     return dict(row)
