"""Serializers for plan outputs."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ...models.domain import PlanResult
from ..geometry import DEPOT_POINT, format_distance, format_hours, parse_grid_code


def plan_result_to_json(result: PlanResult) -> dict:
    return {
        "trips": [asdict(trip) for trip in result.trips],
        "vehicles": [asdict(vehicle) for vehicle in result.vehicles],
        "summary": asdict(result.summary),
        "errors": list(result.errors),
    }


def plan_result_to_csv(result: PlanResult) -> str:
    """Render the summary block followed by one row per trip, ``;``-delimited."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=";", lineterminator="\n")
    summary = result.summary

    writer.writerow(["Summary"])
    writer.writerow(["Trips", summary.total_trips])
    writer.writerow(["Volume moved, t", f"{summary.total_volume:.2f}"])
    writer.writerow(["Total distance, km", format_distance(summary.total_distance)])
    writer.writerow(["Loaded distance, km", format_distance(summary.loaded_distance)])
    writer.writerow(["Empty distance, km", format_distance(summary.empty_distance)])
    writer.writerow(["Utilization", f"{summary.utilization:.2f}"])
    writer.writerow(["Vehicles required", summary.vehicles_required])
    writer.writerow([])
    writer.writerow(["Trips"])
    writer.writerow(
        [
            "Vehicle",
            "Trip",
            "Route",
            "Load, t",
            "Distance, km",
            "Time, h",
            "Start, h",
            "End, h",
        ]
    )
    for trip in result.trips:
        writer.writerow(
            [
                f"#{trip.vehicle_id}",
                trip.trip_number,
                trip.request_label,
                f"{trip.load:.2f}",
                format_distance(trip.distances.total),
                format_hours(trip.timing.total),
                format_hours(trip.schedule.start_time),
                format_hours(trip.schedule.end_time),
            ]
        )
    return buffer.getvalue()


def build_route_overlays(result: PlanResult) -> list[dict]:
    """Per-trip polylines in grid coordinates (column, row) for route-map renderers."""

    depot = [DEPOT_POINT.column, DEPOT_POINT.row]
    overlays: list[dict] = []
    for trip in result.trips:
        shipper = parse_grid_code(trip.shipper_code)
        receiver = parse_grid_code(trip.receiver_code)
        if shipper is None or receiver is None:
            continue
        overlays.append(
            {
                "trip_id": trip.id,
                "request_id": trip.request_id,
                "vehicle_id": trip.vehicle_id,
                "coordinates": [
                    depot,
                    [shipper.column, shipper.row],
                    [receiver.column, receiver.row],
                    depot,
                ],
            }
        )
    return overlays
