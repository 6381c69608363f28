"""
Dashboard API Endpoints.

Read-only views for the planning board: drivers grouped by location and
tours sorted newest shipment first, annotated for display.
"""

from datetime import date
from typing import Dict, List

from fastapi import APIRouter, Depends

from backend.app.db.storage import MemStorage, get_storage
from backend.app.domain.dates import days_between, format_display_date, is_date_in_past
from backend.app.domain.validators import get_initials
from backend.app.schemas.dashboard import DriverCard, DriverGroup, TourCard
from backend.app.services.assignment import is_driver_location_match, resolve_driver_name

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/drivers", response_model=List[DriverGroup])
async def drivers_by_location(storage: MemStorage = Depends(get_storage)):
    """
    Group drivers by their exact location string.

    Groups appear in the order their first driver was created.
    """
    groups: Dict[str, List[DriverCard]] = {}
    for driver in storage.get_drivers():
        card = DriverCard(
            id=driver.id,
            name=driver.name,
            location=driver.location,
            initials=get_initials(driver.name)
        )
        groups.setdefault(driver.location, []).append(card)

    return [
        DriverGroup(location=location, drivers=cards)
        for location, cards in groups.items()
    ]


@router.get("/tours", response_model=List[TourCard])
async def tour_board(storage: MemStorage = Depends(get_storage)):
    """
    List tours by shipment date, most recent first.

    Tours whose assigned driver no longer lives at the starting location are
    flagged with ``locationMismatch`` but still listed.
    """
    drivers = {driver.id: driver for driver in storage.get_drivers()}
    today = date.today()
    tours = sorted(storage.get_tours(), key=lambda t: t.shipment_date, reverse=True)

    cards = []
    for tour in tours:
        driver = drivers.get(tour.driver_id) if tour.driver_id is not None else None
        cards.append(TourCard(
            id=tour.id,
            customer_name=tour.customer_name,
            shipment_date=tour.shipment_date,
            location_from=tour.location_from,
            location_to=tour.location_to,
            driver_id=tour.driver_id,
            display_date=format_display_date(tour.shipment_date),
            is_past=is_date_in_past(tour.shipment_date, today),
            days_until=days_between(today, tour.shipment_date),
            driver_name=resolve_driver_name(tour.driver_id, drivers),
            location_mismatch=driver is not None and not is_driver_location_match(driver, tour.location_from)
        ))
    return cards
