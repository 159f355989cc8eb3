"""Delivery planning: trip splitting, vehicle assignment and scheduling."""

from .builder import build_plan
from .fleet import SHIFT_FIT_TOLERANCE, VehiclePool
from .service import check_parameters, default_parameters, export_plan_csv, plan_shipments

__all__ = [
    "SHIFT_FIT_TOLERANCE",
    "VehiclePool",
    "build_plan",
    "check_parameters",
    "default_parameters",
    "export_plan_csv",
    "plan_shipments",
]
