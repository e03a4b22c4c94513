"""Plain-text rendering of riders, drivers and trips for the console."""

from __future__ import annotations

from typing import Union

from ridesharing.config import settings
from ridesharing.domain.entities import Driver, Rider, Trip


def format_trip(trip: Trip, currency: str = settings.currency_symbol) -> str:
    return (
        f"Trip ID: {trip.trip_id}, Rider: {trip.rider_name}, "
        f"Driver: {trip.driver_name or ''}, From: {trip.start_location}, "
        f"To: {trip.end_location}, Status: {trip.status.value}, "
        f"Fare: {trip.fare:.15g}{currency}"
    )


def format_history(trips: list[Trip]) -> list[str]:
    if not trips:
        return ["No trips found."]
    return [format_trip(t) for t in trips]


def format_profile(user: Union[Rider, Driver]) -> list[str]:
    """Profile header, role block and the user's trip history."""
    ident = user.identity
    lines = [
        f"User ID: {ident.user_id}, Name: {ident.name}, "
        f"Phone Number: {ident.phone_number}",
        f"User Type: {user.role.value}",
    ]
    if isinstance(user, Driver):
        lines.append(
            f"Driver ID: {user.driver_id}, Vehicle Details: {user.vehicle_details}, "
            f"Availability: {user.is_available}"
        )
        lines.append("Trip History:")
        lines.extend(format_history(user.trip_history))
    else:
        lines.append("Ride History:")
        lines.extend(format_history(user.ride_history))
    return lines


def format_registration(user: Union[Rider, Driver]) -> list[str]:
    lines = [f"{user.name} has been registered."]
    if isinstance(user, Driver):
        lines.append(f"Driver ID: {user.driver_id}, Vehicle: {user.vehicle_details}")
    lines.append(f"{user.name} registered as {user.role.value}.")
    return lines
