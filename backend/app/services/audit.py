"""
Audit logging service for tracking driver and tour changes.

Events go to the ``tourplanner.audit`` logger as one structured line each.
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger("tourplanner.audit")


# Audit event constants
class AuditAction:
    """Standardized audit action constants."""
    DRIVER_CREATED = "DRIVER_CREATED"
    DRIVER_UPDATED = "DRIVER_UPDATED"

    TOUR_CREATED = "TOUR_CREATED"
    TOUR_UPDATED = "TOUR_UPDATED"
    TOUR_DELETED = "TOUR_DELETED"

    DRIVER_ASSIGNED = "DRIVER_ASSIGNED"
    DRIVER_UNASSIGNED = "DRIVER_UNASSIGNED"
    ASSIGNMENT_REJECTED = "ASSIGNMENT_REJECTED"


def log_event(action: str, metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Log an audit event.

    Args:
        action: Action being performed (use AuditAction constants)
        metadata: Additional context (ids, changed fields)

    Returns:
        The event as logged
    """
    event = {"action": action, "metadata": metadata or {}}
    logger.info("%s %s", action, event["metadata"], extra={"audit_action": action})
    return event
