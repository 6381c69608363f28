"""
Tour Pydantic schemas.

Defines request and response models for tour management. Shipment dates are
normalised to ``YYYY-MM-DD`` while parsing the request.
"""

from typing import Optional

from pydantic import Field, StrictInt, field_validator

from backend.app.domain.dates import normalize_shipment_date
from backend.app.schemas.base import CamelModel


class TourCreate(CamelModel):
    """Schema for creating a new tour."""
    customer_name: str
    shipment_date: str = Field(..., description="Date of shipment")
    location_from: str
    location_to: str
    driver_id: Optional[StrictInt] = Field(None, description="Assigned driver, must start where the tour starts")

    @field_validator("shipment_date")
    @classmethod
    def normalize_date(cls, value):
        return normalize_shipment_date(value)


class TourUpdate(CamelModel):
    """
    Schema for updating an existing tour.

    Only fields present in the request body are applied. ``driverId: null``
    unassigns the driver; leaving ``driverId`` out keeps the current one.
    """
    customer_name: Optional[str] = None
    shipment_date: Optional[str] = None
    location_from: Optional[str] = None
    location_to: Optional[str] = None
    driver_id: Optional[StrictInt] = None

    @field_validator("shipment_date")
    @classmethod
    def normalize_date(cls, value):
        if value is None:
            return None
        return normalize_shipment_date(value)


class TourResponse(CamelModel):
    """Schema for tour response."""
    id: int
    customer_name: str
    shipment_date: str
    location_from: str
    location_to: str
    driver_id: Optional[int]
