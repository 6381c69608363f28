"""
Tour record held by the in-memory storage.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Tour:
    """
    A scheduled shipment from ``location_from`` to ``location_to``.

    ``shipment_date`` is an ISO ``YYYY-MM-DD`` string. ``driver_id`` is not a
    foreign key; storage accepts any value and the API checks it.
    """
    id: int
    customer_name: str
    shipment_date: str
    location_from: str
    location_to: str
    driver_id: Optional[int] = None
