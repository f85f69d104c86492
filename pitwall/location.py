"""Where a race weekend takes place."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class LocationType(IntEnum):
    EUROPEAN = 0
    NONEUROPEAN = 1
    FACTORY = 2


@dataclass(frozen=True)
class Location:
    """A venue and the region it lies in."""

    location_type: LocationType
    venue: str