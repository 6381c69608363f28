"""
Driver record held by the in-memory storage.
"""

from dataclasses import dataclass


@dataclass
class Driver:
    """
    A driver with a home location.

    The location never contains digits; that rule is checked by the API
    layer before a record reaches storage.
    """
    id: int
    name: str
    location: str
