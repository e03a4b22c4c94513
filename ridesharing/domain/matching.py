"""
Driver Matching & Trip Selection
================================

Matching is deliberately first-come, first-served:

1. **Driver candidate** -- the first driver in registration order whose
   availability flag is set.  No distance or rating ranking.
2. **Trip selection** -- the oldest trip (lowest id / insertion order) in
   the status the caller expects, so acceptance never picks up a trip that
   is already running and completion never re-completes a finished one.

Both functions are pure queries: they never reserve or mutate anything.
The registry performs the reservation as a separate step once a trip is
actually being attached.

Complexity: O(n) linear scan per call.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .entities import Driver, Trip
from .enums import TripStatus


def first_available(drivers: Iterable[Driver]) -> Optional[Driver]:
    """Return the earliest-registered available driver, or ``None``."""
    for driver in drivers:
        if driver.is_available:
            return driver
    return None


def oldest_trip_with_status(
    trips: Iterable[Trip], *statuses: TripStatus
) -> Optional[Trip]:
    """Return the first trip (request order) whose status is in *statuses*."""
    wanted = set(statuses)
    for trip in trips:
        if trip.status in wanted:
            return trip
    return None
