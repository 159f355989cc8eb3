"""Plan serializers."""

from .plan_formatter import build_route_overlays, plan_result_to_csv, plan_result_to_json

__all__ = ["build_route_overlays", "plan_result_to_csv", "plan_result_to_json"]
