"""
Driver-to-tour assignment rules.

A driver may only be assigned to a tour whose starting location equals the
driver's home location (case-insensitive). The check runs when a tour is
created with a driver, when a driver is assigned on update, and when the
starting location of an already assigned tour changes.
"""

from typing import Any, Dict, List, Optional

from backend.app.core.exceptions import DriverNotFoundError, LocationMismatchError
from backend.app.db.storage import MemStorage
from backend.app.models.driver import Driver
from backend.app.models.tour import Tour
from backend.app.services.audit import log_event, AuditAction


def is_driver_location_match(driver: Driver, location_from: str) -> bool:
    """True if the driver's location equals the tour origin, ignoring case."""
    return driver.location.lower() == location_from.lower()


def validate_assignment(storage: MemStorage, driver_id: int, location_from: str) -> Driver:
    """
    Check that ``driver_id`` may drive a tour starting at ``location_from``.

    Returns:
        The matching driver

    Raises:
        DriverNotFoundError: no driver with that id
        LocationMismatchError: the driver lives somewhere else
    """
    driver = storage.get_driver(driver_id)
    if driver is None:
        log_event(AuditAction.ASSIGNMENT_REJECTED, {
            "driver_id": driver_id,
            "reason": "driver_not_found"
        })
        raise DriverNotFoundError(driver_id)

    if not is_driver_location_match(driver, location_from):
        log_event(AuditAction.ASSIGNMENT_REJECTED, {
            "driver_id": driver_id,
            "driver_location": driver.location,
            "location_from": location_from,
            "reason": "location_mismatch"
        })
        raise LocationMismatchError(driver_id, driver.location, location_from)

    return driver


def check_new_tour(storage: MemStorage, data: Dict[str, Any]) -> None:
    """Validate the driver of a tour about to be created, if it has one."""
    driver_id = data.get("driver_id")
    if driver_id is not None:
        validate_assignment(storage, driver_id, data["location_from"])


def check_tour_update(storage: MemStorage, existing: Tour, changes: Dict[str, Any]) -> None:
    """
    Validate a partial tour update against the assignment rule.

    ``changes`` holds only the fields the client sent. The check runs when a
    non-null driver is being set, or when ``location_from`` changes on a tour
    that already has a driver. Unassigning (``driver_id`` explicitly None)
    never triggers it.
    """
    if "driver_id" in changes and changes["driver_id"] is None:
        return

    new_driver_id = changes.get("driver_id")
    new_location_from = changes.get("location_from")

    if new_driver_id is None and not (new_location_from and existing.driver_id is not None):
        return

    driver_id = new_driver_id if new_driver_id is not None else existing.driver_id
    location_from = new_location_from or existing.location_from
    validate_assignment(storage, driver_id, location_from)


def eligible_drivers(storage: MemStorage, tour: Tour) -> List[Driver]:
    """Drivers whose location matches the tour's starting location."""
    return storage.get_drivers_by_location(tour.location_from)


def resolve_driver_name(driver_id: Optional[int], drivers: Dict[int, Driver]) -> str:
    """Display name for a tour's driver slot."""
    if driver_id is None:
        return "Unassigned"
    driver = drivers.get(driver_id)
    return driver.name if driver else "Unknown Driver"
