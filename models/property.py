from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class Property(Base):
     """
     Property model - a listing that guests can reserve.
     Maps to the 'properties' table in the database.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
     title = Column(String(255), nullable=False)
     description = Column(Text, nullable=True)
     thumbnail_photo_url = Column(String(255), nullable=False)
     cover_photo_url = Column(String(255), nullable=False)
     cost_per_night = Column(Integer, nullable=False, default=0)  # cents

     # Address
     street = Column(String(255), nullable=False)
     city = Column(String(255), nullable=False)
     province = Column(String(255), nullable=False)
     post_code = Column(String(255), nullable=False)
     country = Column(String(255), nullable=False)

     # Rooms
     parking_spaces = Column(Integer, nullable=False, default=0)
     number_of_bathrooms = Column(Integer, nullable=False, default=0)
     number_of_bedrooms = Column(Integer, nullable=False, default=0)

     # Relationships
     owner = relationship("User", back_populates="properties")
     reservations = relationship("Reservation", back_populates="property", cascade="all, delete-orphan")
     reviews = relationship("PropertyReview", back_populates="property", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Property(id={self.id}, title='{self.title}', city='{self.city}')>"
