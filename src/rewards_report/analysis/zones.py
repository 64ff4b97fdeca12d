"""
Availability zone lists for regions.

The API stores a region's zones as one comma-delimited string, or null
when the region has none.
"""

from typing import Optional

ZONE_SEPARATOR = ","


def split_zones(value: Optional[str]) -> list[str]:
    """Split a stored zone string into a list (empty for null or "")."""
    return value.split(ZONE_SEPARATOR) if value else []


def combine_zones(zones: list[str]) -> Optional[str]:
    """Join zones back into the stored form; no zones is stored as None."""
    return ZONE_SEPARATOR.join(zones) if zones else None


def add_zone(value: Optional[str], zone: str) -> Optional[str]:
    """Append a zone unless it is blank or already present."""
    zones = split_zones(value)
    if not zone or zone in zones:
        return value
    zones.append(zone)
    return combine_zones(zones)


def remove_zone(value: Optional[str], zone: str) -> Optional[str]:
    """Drop every occurrence of a zone."""
    return combine_zones([z for z in split_zones(value) if z != zone])
