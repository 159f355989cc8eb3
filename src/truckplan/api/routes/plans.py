"""Planning endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from ...schemas.planning import PlannerParametersModel, PlanRequest, PlanResponse
from ...services.planning.service import default_parameters, export_plan_csv, plan_shipments

router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("/defaults", response_model=PlannerParametersModel, status_code=status.HTTP_200_OK)
def get_defaults() -> PlannerParametersModel:
    """Parameter set used when a plan request does not override it."""
    params = default_parameters()
    return PlannerParametersModel(
        capacity=params.capacity,
        load_unload_rate=params.load_unload_rate,
        cell_size=params.cell_size,
        speed=params.speed,
        distance_mode=params.distance_mode,
        workday_length=params.workday_length,
    )


@router.post("", response_model=PlanResponse, status_code=status.HTTP_200_OK)
def create_plan(payload: PlanRequest) -> PlanResponse:
    try:
        return plan_shipments(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error building plan: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build plan: {str(exc)}"
        ) from exc


@router.post("/export.csv", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def export_plan(payload: PlanRequest) -> PlainTextResponse:
    try:
        content = export_plan_csv(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error exporting plan: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export plan: {str(exc)}"
        ) from exc
    # UTF-8 BOM first, as spreadsheet imports expect
    return PlainTextResponse(
        "\ufeff" + content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="operational-plan.csv"'},
    )
