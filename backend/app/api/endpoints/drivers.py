"""
Driver API Endpoints.

Create, list, look up and update drivers. Drivers cannot be deleted.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from backend.app.core.exceptions import ResourceNotFoundError, ValidationError
from backend.app.db.storage import MemStorage, get_storage
from backend.app.domain.validators import is_non_empty, is_valid_location
from backend.app.schemas.driver import DriverCreate, DriverUpdate, DriverResponse
from backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/drivers", tags=["Drivers"])

LOCATION_DIGITS_MESSAGE = "Location cannot contain numbers"


def validate_driver_fields(data: dict) -> None:
    """Reject blank names/locations and locations containing digits."""
    if "name" in data and not is_non_empty(data["name"]):
        raise ValidationError("Name is required", field="name")
    if "location" in data:
        if not is_non_empty(data["location"]):
            raise ValidationError("Location is required", field="location")
        if not is_valid_location(data["location"]):
            raise ValidationError(LOCATION_DIGITS_MESSAGE, field="location")


@router.get("", response_model=List[DriverResponse])
async def list_drivers(storage: MemStorage = Depends(get_storage)):
    """List all drivers in creation order."""
    return [DriverResponse.model_validate(driver) for driver in storage.get_drivers()]


@router.get("/location/{location}", response_model=List[DriverResponse])
async def list_drivers_by_location(
    location: str = Path(..., description="Location to match, case-insensitive"),
    storage: MemStorage = Depends(get_storage)
):
    """List drivers based in the given location."""
    drivers = storage.get_drivers_by_location(location)
    return [DriverResponse.model_validate(driver) for driver in drivers]


@router.get("/{driver_id}", response_model=DriverResponse)
async def get_driver(
    driver_id: int = Path(..., description="Driver ID"),
    storage: MemStorage = Depends(get_storage)
):
    driver = storage.get_driver(driver_id)
    if driver is None:
        raise ResourceNotFoundError("Driver", driver_id)
    return DriverResponse.model_validate(driver)


@router.post("", response_model=DriverResponse, status_code=status.HTTP_201_CREATED)
async def create_driver(
    driver_data: DriverCreate,
    storage: MemStorage = Depends(get_storage)
):
    """
    Create a new driver.

    The location must not contain any digit.
    """
    data = driver_data.model_dump()
    validate_driver_fields(data)

    driver = storage.create_driver(data)

    log_event(AuditAction.DRIVER_CREATED, {
        "driver_id": driver.id,
        "location": driver.location
    })

    return DriverResponse.model_validate(driver)


@router.put("/{driver_id}", response_model=DriverResponse)
async def update_driver(
    driver_id: int = Path(..., description="Driver ID"),
    driver_data: DriverUpdate = ...,
    storage: MemStorage = Depends(get_storage)
):
    """
    Update a driver's name and/or location.

    Tours already assigned to this driver are not re-checked; a relocated
    driver simply shows up as a location mismatch on the dashboard.
    """
    # Update fields (only if provided)
    update_data = {
        field: value
        for field, value in driver_data.model_dump(exclude_unset=True).items()
        if value is not None
    }
    validate_driver_fields(update_data)

    driver = storage.update_driver(driver_id, update_data)
    if driver is None:
        raise ResourceNotFoundError("Driver", driver_id)

    log_event(AuditAction.DRIVER_UPDATED, {
        "driver_id": driver.id,
        "updated_fields": list(update_data.keys())
    })

    return DriverResponse.model_validate(driver)
