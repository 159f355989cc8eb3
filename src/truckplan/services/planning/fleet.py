"""Vehicle pool used while a plan is being built."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import List

from ...models.domain import TripPlan, VehicleSchedule

# Numerical slack for the "trip still fits in the shift" comparison.
SHIFT_FIT_TOLERANCE = 1e-6


@dataclass(slots=True)
class VehicleState:
    id: int
    available_time: float = 0.0
    total_distance: float = 0.0
    total_time: float = 0.0
    trips: List[TripPlan] = field(default_factory=list)


class VehiclePool:
    """Greedy first-fit pool ordered by earliest availability.

    Vehicles live in a min-heap keyed by ``(available_time, vehicle_id)``, so
    ties go to the vehicle created first. A vehicle handed out by
    :meth:`select` is off the heap until :meth:`record_trip` books the trip and
    pushes it back with its new availability.
    """

    def __init__(self, workday_length: float) -> None:
        self.workday_length = workday_length
        self._vehicles: list[VehicleState] = []
        self._heap: list[tuple[float, int]] = []

    def __len__(self) -> int:
        return len(self._vehicles)

    def fits(self, available_time: float, trip_duration: float) -> bool:
        return available_time + trip_duration <= self.workday_length + SHIFT_FIT_TOLERANCE

    def select(self, trip_duration: float) -> VehicleState:
        # The heap top has the earliest availability: if it cannot take the
        # trip, no other vehicle can either.
        if self._heap:
            available_time, vehicle_id = self._heap[0]
            if self.fits(available_time, trip_duration):
                heapq.heappop(self._heap)
                return self._vehicles[vehicle_id - 1]
        return self._create_vehicle()

    def record_trip(self, vehicle: VehicleState, trip: TripPlan) -> None:
        vehicle.trips.append(trip)
        vehicle.available_time = trip.schedule.end_time
        vehicle.total_distance += trip.distances.total
        vehicle.total_time += trip.timing.total
        heapq.heappush(self._heap, (vehicle.available_time, vehicle.id))

    def schedules(self) -> list[VehicleSchedule]:
        return [
            VehicleSchedule(
                vehicle_id=vehicle.id,
                trips=list(vehicle.trips),
                total_distance=vehicle.total_distance,
                total_time=vehicle.total_time,
            )
            for vehicle in self._vehicles
        ]

    def _create_vehicle(self) -> VehicleState:
        vehicle = VehicleState(id=len(self._vehicles) + 1)
        self._vehicles.append(vehicle)
        return vehicle
