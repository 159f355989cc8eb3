"""Domain models for grid points, shipment requests and delivery plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

DistanceMode = Literal["manhattan", "euclidean"]


@dataclass(frozen=True, slots=True)
class GridPoint:
    """A validated zone-grid code with its 0-indexed column and row."""

    code: str
    column: int
    row: int


@dataclass(slots=True)
class ShipmentRequest:
    """Represents a customer request to move a volume between two grid zones."""

    id: str
    shipper_code: str
    receiver_code: str
    volume: float
    working_hours: float


@dataclass(slots=True)
class PlannerParameters:
    capacity: float
    load_unload_rate: float
    cell_size: float
    speed: float
    distance_mode: DistanceMode
    workday_length: float


@dataclass(slots=True)
class RouteDistance:
    to_shipper: float
    to_receiver: float
    to_depot: float
    total: float


@dataclass(slots=True)
class RouteTiming:
    travel: float
    loading: float
    unloading: float
    total: float


@dataclass(slots=True)
class TripSchedule:
    start_time: float
    arrival_shipper: float
    departure_shipper: float
    arrival_receiver: float
    departure_receiver: float
    end_time: float


@dataclass(slots=True)
class TripPlan:
    """One depot -> shipper -> receiver -> depot round trip carrying a single load."""

    id: str
    request_id: str
    request_label: str
    shipper_code: str
    receiver_code: str
    trip_number: int
    load: float
    distances: RouteDistance
    timing: RouteTiming
    schedule: TripSchedule
    vehicle_id: int
    warnings: List[str] = field(default_factory=list)


@dataclass(slots=True)
class VehicleSchedule:
    vehicle_id: int
    trips: List[TripPlan]
    total_distance: float
    total_time: float


@dataclass(slots=True)
class PlanSummary:
    total_trips: int
    total_volume: float
    total_distance: float
    loaded_distance: float
    empty_distance: float
    utilization: float
    total_time: float
    max_completion_time: float
    vehicles_required: int


@dataclass(slots=True)
class PlanResult:
    trips: List[TripPlan]
    vehicles: List[VehicleSchedule]
    summary: PlanSummary
    errors: List[str]
