import pytest

from truckplan.config import settings
from truckplan.models.domain import PlannerParameters
from truckplan.schemas.planning import PlannerParametersModel, PlanRequest, ShipmentRequestModel
from truckplan.services.planning import service as planning_service


def _payload(*requests: ShipmentRequestModel, parameters: PlannerParametersModel | None = None) -> PlanRequest:
    return PlanRequest(requests=list(requests), parameters=parameters)


def _item(shipper: str, receiver: str, volume: float, **extra) -> ShipmentRequestModel:
    return ShipmentRequestModel(shipper_code=shipper, receiver_code=receiver, volume=volume, **extra)


def test_default_parameters_follow_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "default_capacity", 10.0)

    params = planning_service.default_parameters()

    assert params.capacity == 10.0
    assert params.speed == settings.default_speed
    assert params.distance_mode == "manhattan"


def test_plan_uses_default_parameters():
    response = planning_service.plan_shipments(_payload(_item("B3", "E2", 8, working_hours=10)))

    assert [trip.load for trip in response.trips] == [6, 2]
    assert response.metadata["parameters"]["capacity"] == 6
    assert response.metadata["depot"]["code"] == "D5"
    assert response.metadata["status"] == "complete"


def test_parameter_overrides_are_applied():
    response = planning_service.plan_shipments(
        _payload(
            _item("B3", "E2", 8),
            parameters=PlannerParametersModel(capacity=4, distance_mode="euclidean"),
        )
    )

    assert [trip.load for trip in response.trips] == [4, 4]
    assert response.metadata["parameters"]["distance_mode"] == "euclidean"
    assert response.metadata["parameters"]["speed"] == settings.default_speed


def test_missing_ids_and_working_hours_get_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "default_working_hours", 1.0)

    response = planning_service.plan_shipments(_payload(_item("B3", "E2", 2), _item("A1", "A2", 1)))

    assert [trip.request_id for trip in response.trips] == ["R1", "R2"]
    assert any("1.00" in warning for warning in response.trips[0].warnings)


def test_empty_request_list_is_rejected():
    with pytest.raises(ValueError):
        planning_service.plan_shipments(_payload())


@pytest.mark.parametrize(
    "overrides",
    [
        {"capacity": 0},
        {"speed": 0},
        {"cell_size": -1},
        {"load_unload_rate": -0.1},
        {"workday_length": 0},
        {"distance_mode": "chebyshev"},
    ],
)
def test_check_parameters_rejects_unusable_values(overrides):
    values = dict(
        capacity=6.0,
        load_unload_rate=0.1,
        cell_size=4.0,
        speed=40.0,
        distance_mode="manhattan",
        workday_length=24.0,
    )
    values.update(overrides)

    with pytest.raises(ValueError):
        planning_service.check_parameters(PlannerParameters(**values))


def test_rejected_requests_are_reported_not_raised():
    response = planning_service.plan_shipments(_payload(_item("G1", "E2", 3)))

    assert response.trips == []
    assert len(response.errors) == 1
    assert response.metadata["status"] == "empty"


def test_export_plan_csv():
    content = planning_service.export_plan_csv(_payload(_item("B3", "E2", 8, id="R1", working_hours=10)))

    lines = content.splitlines()
    assert lines[0] == "Summary"
    assert "#1;1;B3 → E2;6.00;48.0;2.40;0.00;2.40" in lines
    assert "#1;2;B3 → E2;2.00;48.0;1.60;2.40;4.00" in lines


def test_generated_request_ids_do_not_collide_with_explicit_ones():
    response = planning_service.plan_shipments(
        _payload(_item("B3", "E2", 2), _item("A1", "F6", 2, id="R1"))
    )

    ids = [trip.id for trip in response.trips]
    assert len(set(ids)) == len(ids)
    assert [trip.request_id for trip in response.trips] == ["R1", "R1"]
    overlay_ids = [overlay["trip_id"] for overlay in response.metadata["map_overlays"]["routes"]]
    assert overlay_ids == ids
