from .query_builder import QueryBuilder, SqlStatement, build_property_search, build_update
from .user_service import (
     get_user_with_email,
     get_user_with_id,
     add_user,
     authenticate_user,
     hash_password,
     verify_password,
)
from .property_service import get_all_properties, add_property
from .reservation_service import (
     add_reservation,
     get_fulfilled_reservations,
     get_upcoming_reservations,
     get_individual_reservation,
     update_reservation,
     delete_reservation,
)
from .review_service import get_reviews_by_property, add_review

__all__ = [
     "QueryBuilder",
     "SqlStatement",
     "build_property_search",
     "build_update",
     "get_user_with_email",
     "get_user_with_id",
     "add_user",
     "authenticate_user",
     "hash_password",
     "verify_password",
     "get_all_properties",
     "add_property",
     "add_reservation",
     "get_fulfilled_reservations",
     "get_upcoming_reservations",
     "get_individual_reservation",
     "update_reservation",
     "delete_reservation",
     "get_reviews_by_property",
     "add_review",
]
