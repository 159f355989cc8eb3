"""Greedy trip splitting, vehicle assignment and schedule computation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from ...models.domain import (
    GridPoint,
    PlannerParameters,
    PlanResult,
    PlanSummary,
    RouteDistance,
    RouteTiming,
    ShipmentRequest,
    TripPlan,
    TripSchedule,
)
from ..geometry import DEPOT_POINT, calculate_distance, format_hours, normalize_code, parse_grid_code
from .fleet import VehiclePool

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AcceptedRequest:
    request: ShipmentRequest
    shipper: GridPoint
    receiver: GridPoint
    # 1-based position in the submitted batch
    position: int


def validate_requests(requests: Sequence[ShipmentRequest]) -> tuple[list[AcceptedRequest], list[str]]:
    """Split requests into plannable ones and human-readable rejection messages.

    Rejected requests are skipped; the rest keep their input order.
    """

    accepted: list[AcceptedRequest] = []
    errors: list[str] = []
    for position, request in enumerate(requests, start=1):
        shipper_code = normalize_code(request.shipper_code or "")
        receiver_code = normalize_code(request.receiver_code or "")
        if not shipper_code or not receiver_code:
            errors.append(f"Request {request.id} is missing a shipper or receiver code.")
            continue
        if not math.isfinite(request.volume) or request.volume <= 0:
            errors.append(f"Request {shipper_code}-{receiver_code} has a non-positive volume.")
            continue
        shipper = parse_grid_code(shipper_code)
        receiver = parse_grid_code(receiver_code)
        if shipper is None or receiver is None:
            errors.append(f"Request {shipper_code}-{receiver_code}: invalid customer code.")
            continue
        accepted.append(AcceptedRequest(request=request, shipper=shipper, receiver=receiver, position=position))
    return accepted, errors


def split_volume(volume: float, capacity: float) -> list[float]:
    """Peel capacity-sized loads off a volume; the last load carries the remainder."""

    loads: list[float] = []
    remaining = volume
    while remaining > 0:
        load = min(capacity, remaining)
        remaining -= load
        loads.append(load)
    return loads


def compute_distances(shipper: GridPoint, receiver: GridPoint, params: PlannerParameters) -> RouteDistance:
    to_shipper = calculate_distance(DEPOT_POINT, shipper, params.cell_size, params.distance_mode)
    to_receiver = calculate_distance(shipper, receiver, params.cell_size, params.distance_mode)
    to_depot = calculate_distance(receiver, DEPOT_POINT, params.cell_size, params.distance_mode)
    return RouteDistance(
        to_shipper=to_shipper,
        to_receiver=to_receiver,
        to_depot=to_depot,
        total=to_shipper + to_receiver + to_depot,
    )


def compute_timing(distances: RouteDistance, load: float, params: PlannerParameters) -> RouteTiming:
    loading = load * params.load_unload_rate
    unloading = load * params.load_unload_rate
    travel = (
        distances.to_shipper / params.speed
        + distances.to_receiver / params.speed
        + distances.to_depot / params.speed
    )
    return RouteTiming(
        travel=travel,
        loading=loading,
        unloading=unloading,
        total=travel + loading + unloading,
    )


def compute_schedule(
    start_time: float,
    distances: RouteDistance,
    timing: RouteTiming,
    speed: float,
) -> TripSchedule:
    arrival_shipper = start_time + distances.to_shipper / speed
    departure_shipper = arrival_shipper + timing.loading
    arrival_receiver = departure_shipper + distances.to_receiver / speed
    departure_receiver = arrival_receiver + timing.unloading
    return TripSchedule(
        start_time=start_time,
        arrival_shipper=arrival_shipper,
        departure_shipper=departure_shipper,
        arrival_receiver=arrival_receiver,
        departure_receiver=departure_receiver,
        end_time=start_time + timing.total,
    )


def collect_warnings(
    request: ShipmentRequest,
    schedule: TripSchedule,
    timing: RouteTiming,
    params: PlannerParameters,
) -> list[str]:
    warnings: list[str] = []
    if schedule.departure_receiver > request.working_hours:
        warnings.append(
            "Customer working hours exceeded "
            f"({format_hours(schedule.departure_receiver)} h > {format_hours(request.working_hours)} h)."
        )
    if timing.total > params.workday_length:
        warnings.append(
            "Trip duration exceeds shift length "
            f"({format_hours(timing.total)} h > {format_hours(params.workday_length)} h)."
        )
    return warnings


def summarize(trips: Sequence[TripPlan], total_volume: float, vehicles_required: int) -> PlanSummary:
    total_distance = sum(trip.distances.total for trip in trips)
    loaded_distance = sum(trip.distances.to_receiver for trip in trips)
    return PlanSummary(
        total_trips=len(trips),
        total_volume=total_volume,
        total_distance=total_distance,
        loaded_distance=loaded_distance,
        empty_distance=total_distance - loaded_distance,
        utilization=0.0 if total_distance == 0 else loaded_distance / total_distance,
        total_time=sum(trip.timing.total for trip in trips),
        max_completion_time=max((trip.schedule.end_time for trip in trips), default=0.0),
        vehicles_required=vehicles_required,
    )


def build_plan(requests: Sequence[ShipmentRequest], params: PlannerParameters) -> PlanResult:
    """Build the delivery plan for ``requests``.

    Parameter sanity (positive capacity, speed and cell size) is the caller's
    responsibility. Invalid requests end up in ``errors``; nothing is raised.
    """

    accepted, errors = validate_requests(requests)
    pool = VehiclePool(params.workday_length)
    trips: list[TripPlan] = []
    total_volume = 0.0

    for item in accepted:
        request = item.request
        label = f"{item.shipper.code} → {item.receiver.code}"

        for trip_number, load in enumerate(split_volume(request.volume, params.capacity), start=1):
            distances = compute_distances(item.shipper, item.receiver, params)
            timing = compute_timing(distances, load, params)
            vehicle = pool.select(timing.total)
            schedule = compute_schedule(vehicle.available_time, distances, timing, params.speed)
            trip = TripPlan(
                id=f"{item.position}-{trip_number}",
                request_id=request.id,
                request_label=label,
                shipper_code=item.shipper.code,
                receiver_code=item.receiver.code,
                trip_number=trip_number,
                load=load,
                distances=distances,
                timing=timing,
                schedule=schedule,
                vehicle_id=vehicle.id,
                warnings=collect_warnings(request, schedule, timing, params),
            )
            pool.record_trip(vehicle, trip)
            trips.append(trip)
            logger.debug(
                "Trip %s assigned to vehicle %d (%.2f h -> %.2f h)",
                trip.id,
                vehicle.id,
                schedule.start_time,
                schedule.end_time,
            )

        total_volume += request.volume

    return PlanResult(
        trips=trips,
        vehicles=pool.schedules(),
        summary=summarize(trips, total_volume, len(pool)),
        errors=errors,
    )
