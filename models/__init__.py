from .base import Base
from .user import User
from .property import Property
from .reservation import Reservation
from .property_review import PropertyReview

__all__ = [
     "Base",
     "User",
     "Property",
     "Reservation",
     "PropertyReview",
]
