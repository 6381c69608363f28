"""
Read-only dashboard schemas: drivers grouped by location and annotated tours.
"""

from typing import List

from backend.app.schemas.base import CamelModel
from backend.app.schemas.driver import DriverResponse
from backend.app.schemas.tour import TourResponse


class DriverCard(DriverResponse):
    initials: str


class DriverGroup(CamelModel):
    """Drivers sharing one location."""
    location: str
    drivers: List[DriverCard]


class TourCard(TourResponse):
    """
    A tour with display annotations.

    ``location_mismatch`` is set when the assigned driver has since moved
    away from ``location_from``; such tours are still listed.
    """
    display_date: str
    is_past: bool
    days_until: int
    driver_name: str
    location_mismatch: bool
