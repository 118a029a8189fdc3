"""
Review Service - guest reviews of properties.
"""
from typing import Any, Dict, List, Mapping, Union

from sqlalchemy.orm import Session

from database import execute, fetch_all
from schemas import ReviewCreate, parse_input


def get_reviews_by_property(db: Session, property_id: int) -> List[Dict[str, Any]]:
     """Reviews of a property with the guest's name and the stay dates, oldest stay first."""
     return fetch_all(
          db,
          """
          SELECT property_reviews.id, property_reviews.rating AS review_rating, property_reviews.message AS review_text,
                 users.name, properties.title AS property_title, reservations.start_date, reservations.end_date
          FROM property_reviews
          JOIN reservations ON reservations.id = property_reviews.reservation_id
          JOIN properties ON properties.id = property_reviews.property_id
          JOIN users ON users.id = property_reviews.guest_id
          WHERE properties.id = $1
          ORDER BY reservations.start_date ASC
          """,
          [property_id],
          operation="get_reviews_by_property",
     )


def add_review(db: Session, review: Union[ReviewCreate, Mapping[str, Any]]) -> Dict[str, Any]:
     """
     Add a review for a reservation.

     Raises:
          ConstraintViolationError: If guest, property or reservation does not exist
     """
     review = parse_input(ReviewCreate, review)
     row = execute(
          db,
          """
          INSERT INTO property_reviews (guest_id, property_id, reservation_id, rating, message)
          VALUES ($1, $2, $3, $4, $5)
          RETURNING *
          """,
          [review.guest_id, review.property_id, review.reservation_id, review.rating, review.message],
          operation="add_review",
     ).mappings().first()
     return dict(row)
