from sqlalchemy import Column, Integer, SmallInteger, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class PropertyReview(Base):
     """
     PropertyReview model - a guest's rating of a stay.
     Maps to the 'property_reviews' table in the database.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     guest_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
     property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
     reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False)
     rating = Column(SmallInteger, nullable=False, default=0)
     message = Column(Text, nullable=True)

     # Relationships
     guest = relationship("User", back_populates="reviews")
     property = relationship("Property", back_populates="reviews")
     reservation = relationship("Reservation", back_populates="reviews")

     def __repr__(self):
          return f"<PropertyReview(id={self.id}, property_id={self.property_id}, rating={self.rating})>"
