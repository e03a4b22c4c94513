"""
Trip Registry
=============

Sole authority over the rider, driver and trip collections.  Every state
change (registration, ride request, reservation, acceptance, completion)
goes through a ``TripRegistry`` instance; there is no module-level state.

Reservation
-----------
``find_available_driver`` keeps its historical contract (the returned
driver is reserved), but it is built from a pure candidate query followed
by an explicit ``reserve_driver`` step.  ``accept_next_trip`` only
reserves once both a driver *and* a requested trip exist, so a failed
acceptance never strands a driver as unavailable.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ridesharing.config import settings
from ridesharing.domain.entities import Driver, Identity, Rider, Trip
from ridesharing.domain.enums import TripStatus
from ridesharing.domain.exceptions import (
    DriverNotAvailableError,
    NoAvailableDriverError,
    NoTripsAvailableError,
    UserNotFoundError,
)
from ridesharing.domain.matching import first_available, oldest_trip_with_status
from ridesharing.domain.pricing import FixedFarePricing, PricingStrategy

logger = logging.getLogger(__name__)


class TripRegistry:
    def __init__(
        self,
        pricing: Optional[PricingStrategy] = None,
        driver_id_offset: Optional[int] = None,
    ):
        self.pricing = pricing or FixedFarePricing(settings.trip_fare)
        self.driver_id_offset = (
            settings.driver_id_offset if driver_id_offset is None else driver_id_offset
        )
        self.riders: list[Rider] = []
        self.drivers: list[Driver] = []
        self.trips: list[Trip] = []

    # ── Registration ──────────────────────────────────────────────────

    def register_rider(self, name: str, phone_number: str) -> Rider:
        rider = Rider(Identity(len(self.riders) + 1, name, phone_number))
        self.riders.append(rider)
        logger.info("Rider %s registered (user_id=%d)", name, rider.user_id)
        return rider

    def register_driver(
        self, name: str, phone_number: str, vehicle_details: str
    ) -> Driver:
        count = len(self.drivers)
        driver = Driver(
            identity=Identity(count + 1, name, phone_number),
            driver_id=count + self.driver_id_offset + 1,
            vehicle_details=vehicle_details,
        )
        self.drivers.append(driver)
        logger.info(
            "Driver %s registered (user_id=%d, driver_id=%d, vehicle=%s)",
            name,
            driver.user_id,
            driver.driver_id,
            vehicle_details,
        )
        return driver

    # ── Trips ─────────────────────────────────────────────────────────

    def request_ride(self, rider: Rider, start: str, destination: str) -> Trip:
        trip = Trip(
            trip_id=len(self.trips) + 1,
            rider_name=rider.name,
            start_location=start,
            end_location=destination,
            fare=self.pricing.quote(start, destination),
        )
        rider.ride_history.append(trip)
        self.trips.append(trip)
        logger.info(
            "%s requested trip %d from %s to %s",
            rider.name,
            trip.trip_id,
            start,
            destination,
        )
        return trip

    def find_available_driver(self) -> Optional[Driver]:
        """Return the first available driver, reserving it, or ``None``."""
        driver = first_available(self.drivers)
        if driver is None:
            logger.warning("No available drivers at the moment")
            return None
        self.reserve_driver(driver)
        return driver

    def reserve_driver(self, driver: Driver) -> None:
        driver.reserve()
        logger.info("%s is now unavailable", driver.name)

    def release_driver(self, driver: Driver) -> None:
        if driver.has_active_trip:
            raise DriverNotAvailableError(f"{driver.name} is still on a trip.")
        driver.release()
        logger.info("%s is now available", driver.name)

    def accept_trip(self, driver: Driver, trip: Trip) -> Trip:
        """Attach *driver* to *trip* and start it.

        The driver is reserved here unless the caller already did so via
        ``find_available_driver``.
        """
        if driver.has_active_trip:
            raise DriverNotAvailableError(f"{driver.name} is already on a trip.")
        trip.transition_to(TripStatus.IN_PROGRESS)
        if driver.is_available:
            self.reserve_driver(driver)
        trip.driver_name = driver.name
        driver.trip_history.append(trip)
        logger.info("%s accepted trip %d", driver.name, trip.trip_id)
        return trip

    def accept_next_trip(self) -> Trip:
        """Match the oldest requested trip with the first available driver."""
        trip = oldest_trip_with_status(self.trips, TripStatus.REQUESTED)
        if trip is None:
            raise NoTripsAvailableError("No rides available to accept.")
        driver = first_available(self.drivers)
        if driver is None:
            raise NoAvailableDriverError()
        return self.accept_trip(driver, trip)

    def complete_trip(self, trip: Trip) -> Trip:
        """Mark *trip* completed whatever its current status.

        Completing an already-completed trip changes nothing.  The assigned
        driver, if any, becomes available again.
        """
        if trip.status is not TripStatus.COMPLETED:
            trip.transition_to(TripStatus.COMPLETED)
            driver = self._driver_for(trip)
            if driver is not None and not driver.is_available:
                self.release_driver(driver)
        logger.info(
            "Trip %d from %s to %s completed",
            trip.trip_id,
            trip.start_location,
            trip.end_location,
        )
        return trip

    def complete_next_trip(self) -> Trip:
        trip = oldest_trip_with_status(self.trips, TripStatus.IN_PROGRESS)
        if trip is None:
            raise NoTripsAvailableError("No trips available to complete.")
        return self.complete_trip(trip)

    # ── Lookups ───────────────────────────────────────────────────────

    def find_user(self, user_id: int) -> Union[Rider, Driver]:
        """Riders take precedence: both roles number their users from 1."""
        for rider in self.riders:
            if rider.user_id == user_id:
                return rider
        for driver in self.drivers:
            if driver.user_id == user_id:
                return driver
        raise UserNotFoundError(user_id)

    def all_trips(self) -> list[Trip]:
        return list(self.trips)

    def _driver_for(self, trip: Trip) -> Optional[Driver]:
        for driver in self.drivers:
            if any(t is trip for t in driver.trip_history):
                return driver
        return None
