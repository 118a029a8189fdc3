"""
Pydantic schemas for property creation and search filters.
"""
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .base import blank_to_none


class PropertyCreate(BaseModel):
     """Schema for creating a listing. `cost_per_night` is in cents."""
     owner_id: int = Field(..., gt=0)
     title: str = Field(..., min_length=1, max_length=255)
     description: Optional[str] = None
     thumbnail_photo_url: str
     cover_photo_url: str
     cost_per_night: int = Field(..., gt=0, description="Nightly cost in cents")
     street: str
     city: str
     province: str
     post_code: str
     country: str
     parking_spaces: int = Field(0, ge=0)
     number_of_bathrooms: int = Field(0, ge=0)
     number_of_bedrooms: int = Field(0, ge=0)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "owner_id": 1,
                    "title": "Speed lamp",
                    "description": "description",
                    "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                    "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                    "cost_per_night": 93061,
                    "street": "536 Namsub Highway",
                    "city": "Sotboske",
                    "province": "Quebec",
                    "post_code": "28142",
                    "country": "Canada",
                    "parking_spaces": 6,
                    "number_of_bathrooms": 4,
                    "number_of_bedrooms": 8
               }
          }
     )


class PropertySearchFilters(BaseModel):
     """
     Optional filters for the property search.

     Prices are whole currency units per night; the query scales them to cents.
     A price range only applies when both bounds are given.
     """
     city: Optional[str] = None
     owner_id: Optional[int] = None
     minimum_price_per_night: Optional[float] = Field(None, ge=0)
     maximum_price_per_night: Optional[float] = Field(None, ge=0)
     minimum_rating: Optional[float] = Field(None, ge=0, le=5)

     @field_validator("*", mode="before")
     @classmethod
     def _blank_is_absent(cls, value):
          return blank_to_none(value)

     @property
     def has_price_range(self) -> bool:
          return self.minimum_price_per_night is not None and self.maximum_price_per_night is not None
