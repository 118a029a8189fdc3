"""
Reservation Service - booking, listing, moving and cancelling stays.

Fulfilled / upcoming status is not stored; it is derived by comparing the
reservation dates with the current date at query time.
"""
import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy.orm import Session

from database import NotFoundError, execute, fetch_all, fetch_one
from schemas import ReservationCreate, ReservationUpdate, parse_input
from .query_builder import DEFAULT_LIMIT, build_update

logger = logging.getLogger(__name__)

# Properties without reviews still show up; average_rating is NULL for them.
# `id` is the property id (properties.*); the reservation id is `reservation_id`.
_GUEST_RESERVATIONS = """
SELECT properties.*, properties.id AS property_id, reservations.id AS reservation_id, reservations.start_date, reservations.end_date,
       reservations.guest_id, AVG(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = $1
AND {condition}
GROUP BY properties.id, reservations.id
ORDER BY reservations.start_date
LIMIT $3
"""


def add_reservation(db: Session, reservation: Union[ReservationCreate, Mapping[str, Any]]) -> Dict[str, Any]:
     """
     Book a stay for a guest.

     Raises:
          ConstraintViolationError: If the property or guest does not exist
     """
     reservation = parse_input(ReservationCreate, reservation)
     row = execute(
          db,
          """
          INSERT INTO reservations (start_date, end_date, property_id, guest_id)
          VALUES ($1, $2, $3, $4) RETURNING *
          """,
          [reservation.start_date, reservation.end_date, reservation.property_id, reservation.guest_id],
          operation="add_reservation",
     ).mappings().first()
     return dict(row)


def get_fulfilled_reservations(
     db: Session,
     guest_id: int,
     limit: int = DEFAULT_LIMIT,
     today: Optional[date] = None,
) -> List[Dict[str, Any]]:
     """
     Reservations of a guest whose end date has passed.

     Rows carry the property columns (`id` and `property_id` are both the
     property id), `reservation_id`, the stay dates and `average_rating`.
     """
     return fetch_all(
          db,
          _GUEST_RESERVATIONS.format(condition="reservations.end_date < $2"),
          [guest_id, today or date.today(), limit],
          operation="get_fulfilled_reservations",
     )


def get_upcoming_reservations(
     db: Session,
     guest_id: int,
     limit: int = DEFAULT_LIMIT,
     today: Optional[date] = None,
) -> List[Dict[str, Any]]:
     """Reservations of a guest that have not started yet; same row shape as get_fulfilled_reservations."""
     return fetch_all(
          db,
          _GUEST_RESERVATIONS.format(condition="reservations.start_date > $2"),
          [guest_id, today or date.today(), limit],
          operation="get_upcoming_reservations",
     )


def get_individual_reservation(db: Session, reservation_id: int) -> Optional[Dict[str, Any]]:
     """Single reservation row, or None if the id is unknown."""
     return fetch_one(
          db,
          "SELECT * FROM reservations WHERE reservations.id = $1",
          [reservation_id],
          operation="get_individual_reservation",
     )


def _as_date(value: Any) -> date:
     # SQLite hands dates back as ISO strings
     if isinstance(value, date):
          return value
     return date.fromisoformat(str(value)[:10])


def update_reservation(db: Session, reservation_data: Union[ReservationUpdate, Mapping[str, Any]]) -> Dict[str, Any]:
     """
     Move a reservation. Only the dates supplied are changed.

     Returns:
          The updated row

     Raises:
          NotFoundError: If no reservation has that id
          ValueError: If the resulting end_date is not after start_date
     """
     changes = parse_input(ReservationUpdate, reservation_data)
     if changes.start_date is None or changes.end_date is None:
          # One side is kept; check it against the new one
          current = get_individual_reservation(db, changes.reservation_id)
          if current is None:
               raise NotFoundError("update_reservation", f"Reservation {changes.reservation_id} not found")
          start = changes.start_date or _as_date(current["start_date"])
          end = changes.end_date or _as_date(current["end_date"])
          if end <= start:
               raise ValueError("end_date must be after start_date")
     assignments = [
          (column, getattr(changes, column))
          for column in ("start_date", "end_date")
          if getattr(changes, column) is not None
     ]
     statement = build_update("reservations", assignments, "id", changes.reservation_id)
     row = fetch_one(db, statement.text, statement.params, operation="update_reservation")
     if row is None:
          raise NotFoundError("update_reservation", f"Reservation {changes.reservation_id} not found")
     return row


def delete_reservation(db: Session, reservation_id: int) -> None:
     """
     Cancel a reservation.

     Raises:
          NotFoundError: If no reservation has that id
     """
     result = execute(
          db,
          "DELETE FROM reservations WHERE id = $1",
          [reservation_id],
          operation="delete_reservation",
     )
     if result.rowcount == 0:
          logger.info("Reservation %s not found, nothing deleted", reservation_id)
          raise NotFoundError("delete_reservation", f"Reservation {reservation_id} not found")
     logger.info("Deleted reservation %s", reservation_id)
