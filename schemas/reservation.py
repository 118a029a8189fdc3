"""
Pydantic schemas for reservation creation and partial updates.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class ReservationCreate(BaseModel):
     """Schema for booking a stay."""
     start_date: date
     end_date: date
     property_id: int = Field(..., gt=0)
     guest_id: int = Field(..., gt=0)

     @model_validator(mode="after")
     def _end_after_start(self):
          if self.end_date <= self.start_date:
               raise ValueError("end_date must be after start_date")
          return self


class ReservationUpdate(BaseModel):
     """Schema for moving a reservation; only the dates given are changed."""
     reservation_id: int = Field(..., gt=0)
     start_date: Optional[date] = None
     end_date: Optional[date] = None

     @model_validator(mode="after")
     def _has_changes(self):
          if self.start_date is None and self.end_date is None:
               raise ValueError("No fields to update")
          if self.start_date and self.end_date and self.end_date <= self.start_date:
               raise ValueError("end_date must be after start_date")
          return self
