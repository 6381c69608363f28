"""
Field validators shared by the driver and tour endpoints.
"""

import re

_DIGIT_PATTERN = re.compile(r"[0-9]")


def is_valid_location(location: str) -> bool:
    """Return False if the location contains any decimal digit."""
    return _DIGIT_PATTERN.search(location) is None


def is_non_empty(value: str) -> bool:
    """Return False if the value is empty after trimming whitespace."""
    return len(value.strip()) > 0


def get_initials(name: str) -> str:
    """Initials of a name, e.g. "John Doe" -> "JD"."""
    if not name:
        return ""
    return "".join(part[0] for part in name.split(" ") if part).upper()
