from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

# Returned when the public AIS page yields no usable time; old enough that the
# route feed returns its full history.
SENTINEL_CHECKPOINT = datetime(2010, 2, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class PositionRecord:
    """One inReach position placemark, values kept as the feed spells them."""

    id: str
    imei: str
    time_utc: str
    time: str
    latitude: str
    longitude: str
    elevation: str
    velocity: str  # e.g. "12.0 km/h"
    course: str  # degrees, may be fractional
    valid_gps_fix: str
    visibility: str | None = None
