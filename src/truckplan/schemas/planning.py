"""Planning request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class ShipmentRequestModel(BaseModel):
    id: Optional[str] = Field(default=None, description="Request identifier. Generated from position when omitted.")
    shipper_code: str = Field(default="", description="Grid code of the shipper, e.g. 'B3'.")
    receiver_code: str = Field(default="", description="Grid code of the receiver, e.g. 'E2'.")
    volume: float = Field(default=0.0, description="Volume to move, tonnes.")
    working_hours: Optional[float] = Field(
        default=None,
        description="Customer working-hour limit in hours. Falls back to the configured default.",
    )


class PlannerParametersModel(BaseModel):
    capacity: Optional[float] = Field(None, gt=0)
    load_unload_rate: Optional[float] = Field(None, ge=0)
    cell_size: Optional[float] = Field(None, gt=0)
    speed: Optional[float] = Field(None, gt=0)
    distance_mode: Optional[Literal["manhattan", "euclidean"]] = None
    workday_length: Optional[float] = Field(None, gt=0)


class PlanRequest(BaseModel):
    requests: List[ShipmentRequestModel] = Field(default_factory=list)
    parameters: Optional[PlannerParametersModel] = None


class RouteDistanceModel(BaseModel):
    to_shipper: float
    to_receiver: float
    to_depot: float
    total: float


class RouteTimingModel(BaseModel):
    travel: float
    loading: float
    unloading: float
    total: float


class TripScheduleModel(BaseModel):
    start_time: float
    arrival_shipper: float
    departure_shipper: float
    arrival_receiver: float
    departure_receiver: float
    end_time: float


class TripPlanModel(BaseModel):
    id: str
    request_id: str
    request_label: str
    shipper_code: str
    receiver_code: str
    trip_number: int
    load: float
    distances: RouteDistanceModel
    timing: RouteTimingModel
    schedule: TripScheduleModel
    vehicle_id: int
    warnings: List[str]


class VehicleScheduleModel(BaseModel):
    vehicle_id: int
    trips: List[TripPlanModel]
    total_distance: float
    total_time: float


class PlanSummaryModel(BaseModel):
    total_trips: int
    total_volume: float
    total_distance: float
    loaded_distance: float
    empty_distance: float
    utilization: float
    total_time: float
    max_completion_time: float
    vehicles_required: int


class PlanResponse(BaseModel):
    trips: List[TripPlanModel]
    vehicles: List[VehicleScheduleModel]
    summary: PlanSummaryModel
    errors: List[str]
    metadata: dict
