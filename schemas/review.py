from typing import Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator


class ReviewCreate(BaseModel):
     """Schema for reviewing a completed reservation. The reservation may be sent as `id`."""
     guest_id: int = Field(..., gt=0)
     property_id: int = Field(..., gt=0)
     reservation_id: int = Field(..., gt=0, validation_alias=AliasChoices("reservation_id", "id"))
     rating: int = Field(..., ge=0, le=5)
     message: Optional[str] = None

     @field_validator("rating", mode="before")
     @classmethod
     def _truncate_rating(cls, value):
          # Form posts send "4" or "4.5"; fractional ratings are truncated
          if isinstance(value, str):
               try:
                    return int(float(value.strip()))
               except (ValueError, OverflowError):
                    return value
          if isinstance(value, float):
               return int(value)
          return value
