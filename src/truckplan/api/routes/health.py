"""Health and grid description endpoints."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, status

from ...services.geometry import DEPOT_POINT, GRID_LETTERS, GRID_SIZE

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/grid", status_code=status.HTTP_200_OK)
def grid_description() -> dict:
    """Zone grid layout and depot position for map renderers."""
    return {
        "size": GRID_SIZE,
        "letters": list(GRID_LETTERS),
        "depot": asdict(DEPOT_POINT),
    }
