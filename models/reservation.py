from datetime import date
from typing import Optional

from sqlalchemy import Column, Integer, Date, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class Reservation(Base):
     """
     Reservation model - a guest's stay at a property.
     Maps to the 'reservations' table in the database.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     start_date = Column(Date, nullable=False)
     end_date = Column(Date, nullable=False)
     property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
     guest_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

     # Relationships
     property = relationship("Property", back_populates="reservations")
     guest = relationship("User", back_populates="reservations")
     reviews = relationship("PropertyReview", back_populates="reservation", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Reservation(id={self.id}, property_id={self.property_id}, start_date={self.start_date})>"

     def is_fulfilled(self, today: Optional[date] = None) -> bool:
          """A reservation is fulfilled once its end date has passed."""
          return self.end_date < (today or date.today())

     def is_upcoming(self, today: Optional[date] = None) -> bool:
          """A reservation is upcoming while its start date is still ahead."""
          return self.start_date > (today or date.today())
