from .base import parse_input
from .user import UserCreate
from .property import PropertyCreate, PropertySearchFilters
from .reservation import ReservationCreate, ReservationUpdate
from .review import ReviewCreate

__all__ = [
     "parse_input",
     "UserCreate",
     "PropertyCreate",
     "PropertySearchFilters",
     "ReservationCreate",
     "ReservationUpdate",
     "ReviewCreate",
]
