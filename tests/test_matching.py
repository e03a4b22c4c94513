"""Unit tests for driver matching and trip selection."""

from ridesharing.domain.entities import Driver, Identity, Trip
from ridesharing.domain.enums import TripStatus
from ridesharing.domain.matching import first_available, oldest_trip_with_status


def driver(user_id: int, available: bool = True) -> Driver:
    return Driver(
        Identity(user_id, f"D{user_id}", "000"),
        driver_id=100 + user_id,
        vehicle_details="Hatchback",
        is_available=available,
    )


class TestFirstAvailable:
    def test_empty_collection(self):
        assert first_available([]) is None

    def test_all_unavailable(self):
        assert first_available([driver(1, False), driver(2, False)]) is None

    def test_registration_order_wins(self):
        drivers = [driver(1, False), driver(2), driver(3)]
        assert first_available(drivers) is drivers[1]

    def test_is_pure_query(self):
        drivers = [driver(1)]
        first_available(drivers)
        assert drivers[0].is_available is True


class TestOldestTripWithStatus:
    def setup_method(self):
        self.trips = [
            Trip(1, "Ana", "A", "B", 25.0, status=TripStatus.COMPLETED),
            Trip(2, "Cy", "C", "D", 25.0, status=TripStatus.IN_PROGRESS),
            Trip(3, "Di", "E", "F", 25.0),
            Trip(4, "Ed", "G", "H", 25.0),
        ]

    def test_skips_trips_in_other_states(self):
        trip = oldest_trip_with_status(self.trips, TripStatus.REQUESTED)
        assert trip.trip_id == 3

    def test_in_progress(self):
        trip = oldest_trip_with_status(self.trips, TripStatus.IN_PROGRESS)
        assert trip.trip_id == 2

    def test_multiple_statuses(self):
        trip = oldest_trip_with_status(
            self.trips, TripStatus.REQUESTED, TripStatus.IN_PROGRESS
        )
        assert trip.trip_id == 2

    def test_none_matching(self):
        trips = [Trip(1, "Ana", "A", "B", 25.0, status=TripStatus.COMPLETED)]
        assert oldest_trip_with_status(trips, TripStatus.REQUESTED) is None
