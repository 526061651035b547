"""
Parcel Pydantic schemas.

Defines the value object handed to and returned by the parcel store.
"""

import enum

from pydantic import BaseModel, Field, field_validator


class Parcel(BaseModel):
    """
    Parcel value object.
    
    The all-defaults instance ``Parcel()`` is the "not found" result.
    """
    number: int = Field(default=0, description="Storage-assigned parcel number")
    client: int = Field(default=0, description="Owning client identifier")
    status: str = Field(default="", description="Delivery status label")
    address: str = Field(default="", description="Delivery address")
    created_at: str = Field(default="", description="RFC3339 creation timestamp")

    @field_validator("status", mode="before")
    @classmethod
    def unwrap_status(cls, value):
        # ParcelStatus members are persisted as their plain value
        if isinstance(value, enum.Enum):
            return value.value
        return value
    
    class Config:
        from_attributes = True
