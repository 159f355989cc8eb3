from truckplan.models.domain import PlannerParameters, ShipmentRequest
from truckplan.services.outputs.plan_formatter import (
    build_route_overlays,
    plan_result_to_csv,
    plan_result_to_json,
)
from truckplan.services.planning.builder import build_plan


def _plan():
    params = PlannerParameters(
        capacity=6.0,
        load_unload_rate=0.1,
        cell_size=4.0,
        speed=40.0,
        distance_mode="manhattan",
        workday_length=24.0,
    )
    requests = [
        ShipmentRequest(id="R1", shipper_code="B3", receiver_code="E2", volume=8, working_hours=10),
        ShipmentRequest(id="R2", shipper_code="Z9", receiver_code="E2", volume=1, working_hours=10),
    ]
    return build_plan(requests, params)


def test_plan_result_to_json_contains_all_sections():
    payload = plan_result_to_json(_plan())

    assert set(payload) == {"trips", "vehicles", "summary", "errors"}
    assert payload["trips"][0]["distances"]["total"] == 48
    assert payload["trips"][0]["schedule"]["start_time"] == 0
    assert payload["vehicles"][0]["vehicle_id"] == 1
    assert len(payload["vehicles"][0]["trips"]) == 2
    assert payload["summary"]["total_trips"] == 2
    assert len(payload["errors"]) == 1


def test_plan_result_to_csv_layout():
    content = plan_result_to_csv(_plan())
    lines = content.splitlines()

    assert lines[:8] == [
        "Summary",
        "Trips;2",
        "Volume moved, t;8.00",
        "Total distance, km;96.0",
        "Loaded distance, km;32.0",
        "Empty distance, km;64.0",
        "Utilization;0.33",
        "Vehicles required;1",
    ]
    assert lines[8] == ""
    assert lines[9] == "Trips"
    assert lines[10] == "Vehicle;Trip;Route;Load, t;Distance, km;Time, h;Start, h;End, h"
    assert len(lines) == 13


def test_build_route_overlays_uses_grid_coordinates():
    overlays = build_route_overlays(_plan())

    assert len(overlays) == 2
    assert overlays[0]["trip_id"] == "1-1"
    assert overlays[0]["vehicle_id"] == 1
    assert overlays[0]["coordinates"] == [[3, 4], [1, 2], [4, 1], [3, 4]]
