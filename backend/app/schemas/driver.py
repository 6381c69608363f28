"""
Driver Pydantic schemas.

Defines request and response models for driver management.
"""

from typing import Optional

from pydantic import Field

from backend.app.schemas.base import CamelModel


class DriverCreate(CamelModel):
    """Schema for creating a new driver."""
    name: str = Field(..., description="Driver's full name")
    location: str = Field(..., description="Home location, no digits allowed")


class DriverUpdate(CamelModel):
    """Schema for updating an existing driver. Omitted fields are kept."""
    name: Optional[str] = None
    location: Optional[str] = None


class DriverResponse(CamelModel):
    """Schema for driver response."""
    id: int
    name: str
    location: str
