"""Planning orchestration service."""

from __future__ import annotations

import logging
from dataclasses import asdict

from ...config import settings
from ...models.domain import PlannerParameters, PlanResult, ShipmentRequest
from ...schemas.planning import PlannerParametersModel, PlanRequest, PlanResponse
from ..geometry import DEPOT_POINT
from ..outputs.plan_formatter import build_route_overlays, plan_result_to_csv, plan_result_to_json
from .builder import build_plan

logger = logging.getLogger(__name__)


def default_parameters() -> PlannerParameters:
    return PlannerParameters(
        capacity=settings.default_capacity,
        load_unload_rate=settings.default_load_unload_rate,
        cell_size=settings.default_cell_size,
        speed=settings.default_speed,
        distance_mode=settings.default_distance_mode,
        workday_length=settings.default_workday_length,
    )


def _resolve_parameters(overrides: PlannerParametersModel | None) -> PlannerParameters:
    base = default_parameters()
    if overrides is None:
        return base
    return PlannerParameters(
        capacity=overrides.capacity if overrides.capacity is not None else base.capacity,
        load_unload_rate=overrides.load_unload_rate
        if overrides.load_unload_rate is not None
        else base.load_unload_rate,
        cell_size=overrides.cell_size if overrides.cell_size is not None else base.cell_size,
        speed=overrides.speed if overrides.speed is not None else base.speed,
        distance_mode=overrides.distance_mode if overrides.distance_mode is not None else base.distance_mode,
        workday_length=overrides.workday_length
        if overrides.workday_length is not None
        else base.workday_length,
    )


def check_parameters(params: PlannerParameters) -> None:
    """Raise ValueError for parameter sets the planner cannot work with."""

    if params.capacity <= 0 or params.speed <= 0 or params.cell_size <= 0:
        raise ValueError("Capacity, speed and cell size must be greater than zero.")
    if params.load_unload_rate < 0:
        raise ValueError("Load/unload rate must not be negative.")
    if params.workday_length <= 0:
        raise ValueError("Workday length must be greater than zero.")
    if params.distance_mode not in ("manhattan", "euclidean"):
        raise ValueError(f"Unknown distance mode '{params.distance_mode}'.")


def _to_domain_requests(payload: PlanRequest) -> list[ShipmentRequest]:
    requests: list[ShipmentRequest] = []
    for index, item in enumerate(payload.requests, start=1):
        working_hours = item.working_hours
        if working_hours is None or working_hours <= 0:
            working_hours = settings.default_working_hours
        requests.append(
            ShipmentRequest(
                id=item.id or f"R{index}",
                shipper_code=item.shipper_code,
                receiver_code=item.receiver_code,
                volume=item.volume,
                working_hours=working_hours,
            )
        )
    return requests


def _run(payload: PlanRequest) -> tuple[PlanResult, PlannerParameters]:
    if not payload.requests:
        raise ValueError("At least one shipment request is required.")

    params = _resolve_parameters(payload.parameters)
    check_parameters(params)

    requests = _to_domain_requests(payload)
    result = build_plan(requests, params)
    logger.info(
        "Planned %d request(s): %d trip(s), %d vehicle(s), %d rejected",
        len(requests),
        result.summary.total_trips,
        result.summary.vehicles_required,
        len(result.errors),
    )
    for error in result.errors:
        logger.warning("Request rejected: %s", error)
    return result, params


def plan_shipments(payload: PlanRequest) -> PlanResponse:
    result, params = _run(payload)

    metadata = {
        "status": "complete" if result.trips else "empty",
        "parameters": asdict(params),
        "depot": asdict(DEPOT_POINT),
        "map_overlays": {"routes": build_route_overlays(result)},
    }
    return PlanResponse.model_validate({**plan_result_to_json(result), "metadata": metadata})


def export_plan_csv(payload: PlanRequest) -> str:
    result, _ = _run(payload)
    return plan_result_to_csv(result)
