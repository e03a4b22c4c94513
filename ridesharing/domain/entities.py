"""
Domain entities with business logic.

Patterns used
-------------
- **Composition over inheritance**: ``Rider`` and ``Driver`` each hold an
  immutable ``Identity`` instead of extending a common base user.
- **State Pattern** on ``Trip``: enforces valid lifecycle transitions
  (REQUESTED -> IN_PROGRESS -> COMPLETED, or REQUESTED -> COMPLETED).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .enums import TRIP_TRANSITIONS, TripStatus, UserRole
from .exceptions import DriverNotAvailableError, RideSharingError


class InvalidStateTransition(RideSharingError):
    """Raised when a trip status change violates the state machine."""


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Identity:
    user_id: int
    name: str
    phone_number: str


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Trip:
    trip_id: int
    rider_name: str
    start_location: str
    end_location: str
    fare: float
    driver_name: Optional[str] = None
    status: TripStatus = TripStatus.REQUESTED

    def transition_to(self, new_status: TripStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        allowed = TRIP_TRANSITIONS.get(self.status, set())
        if new_status not in allowed:
            raise InvalidStateTransition(
                f"Cannot transition trip {self.trip_id} from "
                f"{self.status.value} to {new_status.value}"
            )
        self.status = new_status


@dataclass
class Rider:
    identity: Identity
    ride_history: list[Trip] = field(default_factory=list)

    role = UserRole.RIDER

    @property
    def user_id(self) -> int:
        return self.identity.user_id

    @property
    def name(self) -> str:
        return self.identity.name


@dataclass
class Driver:
    identity: Identity
    driver_id: int
    vehicle_details: str
    is_available: bool = True
    trip_history: list[Trip] = field(default_factory=list)

    role = UserRole.DRIVER

    @property
    def user_id(self) -> int:
        return self.identity.user_id

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def has_active_trip(self) -> bool:
        return any(t.status is TripStatus.IN_PROGRESS for t in self.trip_history)

    def reserve(self) -> None:
        if not self.is_available:
            raise DriverNotAvailableError(f"{self.name} is already on a trip.")
        self.is_available = False

    def release(self) -> None:
        self.is_available = True
