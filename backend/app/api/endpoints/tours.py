"""
Tour API Endpoints.

CRUD for tours. Assigning a driver is only allowed when the driver's
location matches the tour's starting location.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from backend.app.core.exceptions import ResourceNotFoundError, ValidationError
from backend.app.db.storage import MemStorage, get_storage
from backend.app.domain.validators import is_non_empty
from backend.app.schemas.driver import DriverResponse
from backend.app.schemas.tour import TourCreate, TourUpdate, TourResponse
from backend.app.services.assignment import check_new_tour, check_tour_update, eligible_drivers
from backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/tours", tags=["Tours"])

REQUIRED_TEXT_FIELDS = {
    "customer_name": "Customer name is required",
    "location_from": "Starting location is required",
    "location_to": "Destination is required",
}


def validate_tour_fields(data: dict) -> None:
    for field, message in REQUIRED_TEXT_FIELDS.items():
        if field in data and not is_non_empty(data[field]):
            raise ValidationError(message, field=field)


def get_tour_or_404(storage: MemStorage, tour_id: int):
    tour = storage.get_tour(tour_id)
    if tour is None:
        raise ResourceNotFoundError("Tour", tour_id)
    return tour


@router.get("", response_model=List[TourResponse])
async def list_tours(storage: MemStorage = Depends(get_storage)):
    """List all tours in creation order."""
    return [TourResponse.model_validate(tour) for tour in storage.get_tours()]


@router.get("/{tour_id}", response_model=TourResponse)
async def get_tour(
    tour_id: int = Path(..., description="Tour ID"),
    storage: MemStorage = Depends(get_storage)
):
    return TourResponse.model_validate(get_tour_or_404(storage, tour_id))


@router.get("/{tour_id}/eligible-drivers", response_model=List[DriverResponse])
async def list_eligible_drivers(
    tour_id: int = Path(..., description="Tour ID"),
    storage: MemStorage = Depends(get_storage)
):
    """Drivers who could be assigned to this tour (same starting location)."""
    tour = get_tour_or_404(storage, tour_id)
    return [DriverResponse.model_validate(driver) for driver in eligible_drivers(storage, tour)]


@router.post("", response_model=TourResponse, status_code=status.HTTP_201_CREATED)
async def create_tour(
    tour_data: TourCreate,
    storage: MemStorage = Depends(get_storage)
):
    """
    Create a new tour.

    If ``driverId`` is given the driver must exist and be based in
    ``locationFrom``. The shipment date is stored as ``YYYY-MM-DD``.
    """
    data = tour_data.model_dump()
    validate_tour_fields(data)
    check_new_tour(storage, data)

    tour = storage.create_tour(data)

    log_event(AuditAction.TOUR_CREATED, {
        "tour_id": tour.id,
        "driver_id": tour.driver_id
    })
    if tour.driver_id is not None:
        log_event(AuditAction.DRIVER_ASSIGNED, {
            "tour_id": tour.id,
            "driver_id": tour.driver_id
        })

    return TourResponse.model_validate(tour)


@router.put("/{tour_id}", response_model=TourResponse)
async def update_tour(
    tour_id: int = Path(..., description="Tour ID"),
    tour_data: TourUpdate = ...,
    storage: MemStorage = Depends(get_storage)
):
    """
    Update any subset of a tour's fields.

    Sending ``driverId: null`` unassigns the driver and is always allowed.
    Assigning a driver, or moving the start of an assigned tour, re-runs the
    location check.
    """
    existing = get_tour_or_404(storage, tour_id)

    # Only driver_id may be explicitly nulled; other nulls mean "not sent"
    update_data = {
        field: value
        for field, value in tour_data.model_dump(exclude_unset=True).items()
        if value is not None or field == "driver_id"
    }
    validate_tour_fields(update_data)
    check_tour_update(storage, existing, update_data)

    tour = storage.update_tour(tour_id, update_data)
    if tour is None:
        raise ResourceNotFoundError("Tour", tour_id)

    log_event(AuditAction.TOUR_UPDATED, {
        "tour_id": tour.id,
        "updated_fields": list(update_data.keys())
    })
    if "driver_id" in update_data and update_data["driver_id"] != existing.driver_id:
        action = AuditAction.DRIVER_UNASSIGNED if tour.driver_id is None else AuditAction.DRIVER_ASSIGNED
        log_event(action, {
            "tour_id": tour.id,
            "driver_id": tour.driver_id,
            "previous_driver_id": existing.driver_id
        })

    return TourResponse.model_validate(tour)


@router.delete("/{tour_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tour(
    tour_id: int = Path(..., description="Tour ID"),
    storage: MemStorage = Depends(get_storage)
):
    if not storage.delete_tour(tour_id):
        raise ResourceNotFoundError("Tour", tour_id)

    log_event(AuditAction.TOUR_DELETED, {"tour_id": tour_id})

    return Response(status_code=status.HTTP_204_NO_CONTENT)
