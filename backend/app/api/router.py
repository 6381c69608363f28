"""
API Router.

Aggregates all endpoints served under the API prefix.
"""

from fastapi import APIRouter
from backend.app.api.endpoints import drivers, tours, dashboard

router = APIRouter()

router.include_router(drivers.router)
router.include_router(tours.router)
router.include_router(dashboard.router)
