"""
Interactive console
===================

Numbered menu driving a single ``TripRegistry``:

1. Register as Rider (and request a ride)
2. Register as Driver
3. Accept a Ride (Driver)
4. Complete a Trip
5. View Ride History (Rider/Driver)
6. Display All Trips in System
7. Exit

Malformed input (non-numeric choices or ids, blank names) is reported and
the menu is shown again; it never terminates the session.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pydantic import ValidationError

from ridesharing.cli.display import (
    format_profile,
    format_registration,
    format_trip,
)
from ridesharing.cli.schemas import (
    DriverRegistration,
    HistoryQuery,
    MenuSelection,
    RideRequestInput,
    RiderRegistration,
    describe_error,
)
from ridesharing.config import settings
from ridesharing.domain.exceptions import RideSharingError
from ridesharing.services.registry import TripRegistry

logger = logging.getLogger(__name__)

MENU = (
    "\n--- Ride Sharing System Menu ---",
    "1. Register as Rider",
    "2. Register as Driver",
    "3. Accept a Ride (Driver)",
    "4. Complete a Trip",
    "5. View Ride History (Rider/Driver)",
    "6. Display All Trips in System",
    "7. Exit",
)
EXIT_CHOICE = 7


class ConsoleApp:
    def __init__(
        self,
        registry: Optional[TripRegistry] = None,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.registry = registry or TripRegistry()
        self.input = input_fn
        self.output = output
        self.handlers: dict[int, Callable[[], None]] = {
            1: self.register_rider,
            2: self.register_driver,
            3: self.accept_ride,
            4: self.complete_trip,
            5: self.view_history,
            6: self.display_all_trips,
        }

    def run(self) -> int:
        """Loop until the operator exits or input ends.  Returns exit code."""
        while True:
            for line in MENU:
                self.output(line)
            try:
                raw = self.input("Enter your choice: ")
                choice = MenuSelection(choice=raw.strip()).choice
                if choice == EXIT_CHOICE:
                    break
                handler = self.handlers.get(choice)
                if handler is None:
                    self.output("Invalid choice. Please try again.")
                    continue
                handler()
            except ValidationError as exc:
                self.output(describe_error(exc))
            except RideSharingError as exc:
                self.output(str(exc))
            except (EOFError, KeyboardInterrupt):
                self.output("")
                break
        self.output("Exiting system...")
        return 0

    # ── Menu actions ──────────────────────────────────────────────────

    def register_rider(self) -> None:
        # All four answers are validated before anything is registered.
        name = self.input("Enter Rider Name: ")
        phone = self.input("Enter Phone Number: ")
        start = self.input("Enter Start Location: ")
        destination = self.input("Enter Destination: ")
        details = RiderRegistration(name=name, phone_number=phone)
        ride = RideRequestInput(start_location=start, destination=destination)
        rider = self.registry.register_rider(details.name, details.phone_number)
        self._emit(format_registration(rider))
        self.registry.request_ride(rider, ride.start_location, ride.destination)
        self.output(
            f"{rider.name} requested a ride from {ride.start_location} "
            f"to {ride.destination}."
        )

    def register_driver(self) -> None:
        details = DriverRegistration(
            name=self.input("Enter Driver Name: "),
            phone_number=self.input("Enter Phone Number: "),
            vehicle_details=self.input("Enter Vehicle Details: "),
        )
        driver = self.registry.register_driver(
            details.name, details.phone_number, details.vehicle_details
        )
        self._emit(format_registration(driver))

    def accept_ride(self) -> None:
        trip = self.registry.accept_next_trip()
        self.output(f"{trip.driver_name} is now unavailable.")
        self.output(f"{trip.driver_name} accepted the ride.")

    def complete_trip(self) -> None:
        trip = self.registry.complete_next_trip()
        self.output(
            f"Trip {trip.trip_id} from {trip.start_location} "
            f"to {trip.end_location} completed"
        )

    def view_history(self) -> None:
        raw = self.input("Enter User ID to view history: ")
        query = HistoryQuery(user_id=raw.strip())
        self._emit(format_profile(self.registry.find_user(query.user_id)))

    def display_all_trips(self) -> None:
        self.output("All Trips:")
        self._emit(format_trip(t) for t in self.registry.all_trips())

    def _emit(self, lines) -> None:
        for line in lines:
            self.output(line)


def main() -> int:
    logging.basicConfig(level=settings.log_level)
    logger.debug("Starting ride sharing console")
    return ConsoleApp().run()
