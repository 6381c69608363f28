"""
Fixture rows loaded into storage at startup.

Creates three drivers (Berlin, Hamburg, Munich) and three tours dated today,
in one week and in two weeks. The last tour is left unassigned.
"""

import logging
from datetime import date, timedelta
from typing import Optional

from backend.app.db.storage import MemStorage

logger = logging.getLogger("tourplanner.seed")


def seed_fixtures(storage: MemStorage, today: Optional[date] = None) -> None:
    """Load the demo drivers and tours into an empty storage."""
    today = today or date.today()

    john = storage.create_driver({"name": "John Doe", "location": "Berlin"})
    maria = storage.create_driver({"name": "Maria Schmidt", "location": "Hamburg"})
    storage.create_driver({"name": "Robert Wagner", "location": "Munich"})

    storage.create_tour({
        "customer_name": "Great Company",
        "shipment_date": today.isoformat(),
        "location_from": "Berlin",
        "location_to": "Hamburg",
        "driver_id": john.id
    })
    storage.create_tour({
        "customer_name": "Best Logistics",
        "shipment_date": (today + timedelta(days=7)).isoformat(),
        "location_from": "Hamburg",
        "location_to": "Berlin",
        "driver_id": maria.id
    })
    storage.create_tour({
        "customer_name": "Premium Shipping",
        "shipment_date": (today + timedelta(days=14)).isoformat(),
        "location_from": "Munich",
        "location_to": "Frankfurt",
        "driver_id": None
    })

    logger.info(
        "Seeded %d drivers and %d tours",
        len(storage.get_drivers()), len(storage.get_tours())
    )
