"""
Pydantic schemas for user input validation.
"""
from pydantic import BaseModel, Field, ConfigDict


class UserCreate(BaseModel):
     """Schema for registering a new user. `password` is plain text; it is hashed before insert."""
     name: str = Field(..., min_length=1, max_length=255)
     email: str = Field(..., min_length=3, max_length=255)
     password: str = Field(..., min_length=1)

     model_config = ConfigDict(
          str_strip_whitespace=True,
          json_schema_extra={
               "example": {
                    "name": "Devin Sanders",
                    "email": "sebastianguerra@ymail.com",
                    "password": "password"
               }
          }
     )
