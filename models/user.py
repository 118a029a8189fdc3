from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


class User(Base):
     """
     User model - guests and property owners.
     Maps to the 'users' table; `password` holds a bcrypt hash.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(255), nullable=False)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)

     # Relationships
     properties = relationship("Property", back_populates="owner", cascade="all, delete-orphan")
     reservations = relationship("Reservation", back_populates="guest", cascade="all, delete-orphan")
     reviews = relationship("PropertyReview", back_populates="guest", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}')>"
