"""Domain enumerations and state-transition rules."""

import enum


class TripStatus(str, enum.Enum):
    REQUESTED = "Requested"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


# State machine: maps current status -> set of valid next statuses
TRIP_TRANSITIONS: dict[TripStatus, set[TripStatus]] = {
    TripStatus.REQUESTED: {TripStatus.IN_PROGRESS, TripStatus.COMPLETED},
    TripStatus.IN_PROGRESS: {TripStatus.COMPLETED},
    TripStatus.COMPLETED: set(),
}


class UserRole(str, enum.Enum):
    RIDER = "Rider"
    DRIVER = "Driver"
