"""Zone-grid geometry helpers."""

from __future__ import annotations

import math
import re

from ..models.domain import DistanceMode, GridPoint

GRID_SIZE = 6
GRID_LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E", "F")

# One column letter followed by one row digit.
_CODE_PATTERN = re.compile(r"^([A-Z])(\d)$")

DEPOT_POINT = GridPoint(code="D5", column=3, row=4)


def normalize_code(code: str) -> str:
    return code.strip().upper()


def parse_grid_code(code: str) -> GridPoint | None:
    """Parse a code such as ``"b3"`` into a grid point; return None when it is not on the grid."""

    normalized = normalize_code(code)
    match = _CODE_PATTERN.match(normalized)
    if not match:
        return None
    letter, digit = match.groups()
    if letter not in GRID_LETTERS:
        return None
    number = int(digit)
    if number < 1 or number > GRID_SIZE:
        return None
    return GridPoint(code=normalized, column=GRID_LETTERS.index(letter), row=number - 1)


def calculate_distance(
    origin: GridPoint,
    destination: GridPoint,
    cell_size: float,
    mode: DistanceMode,
) -> float:
    """Distance between two grid points in km under the chosen metric."""

    dx = abs(origin.column - destination.column)
    dy = abs(origin.row - destination.row)
    if mode == "manhattan":
        return cell_size * (dx + dy)
    return cell_size * math.hypot(dx, dy)


def format_hours(value: float) -> str:
    return f"{value:.2f}"


def format_distance(value: float) -> str:
    return f"{value:.1f}"
