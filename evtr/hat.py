"""Point sets for drawing a d-pad hat on a [-1, 1] canvas."""

from __future__ import annotations

from enum import Enum

from evtr.geometry import coord_from_index
from evtr.view_model import HatState


class Edge(Enum):
    """Which end of a grid axis to take indices from."""

    START = "start"
    END = "end"


def edge_indices(total: int, count: int, edge: Edge) -> list[int]:
    """``count`` consecutive indices at the start or end of ``range(total)``."""
    count = min(count, total)
    start = 0 if edge is Edge.START else max(0, total - count)
    return list(range(start, start + count))


def centered_indices(total: int, count: int) -> list[int]:
    """At least one and at most ``total`` consecutive indices centred in the grid."""
    count = max(min(count, total), 1)
    start = max(0, total - count) // 2
    return list(range(start, start + count))


def _horizontal_arm(
    x_indices: list[int], y_indices: list[int], grid_width: int, grid_height: int
) -> list[tuple[float, float]]:
    return [
        (coord_from_index(x, grid_width), coord_from_index(y, grid_height))
        for x in x_indices
        for y in y_indices
    ]


def _vertical_arm(
    y_indices: list[int], x_indices: list[int], grid_width: int, grid_height: int
) -> list[tuple[float, float]]:
    return [
        (coord_from_index(x, grid_width), coord_from_index(y, grid_height))
        for y in y_indices
        for x in x_indices
    ]


def base_points(
    grid_width: int, grid_height: int, blocks: int, thickness: int
) -> list[tuple[float, float]]:
    """All four d-pad arms: left, right, up, then down."""
    blocks_x = min(blocks, grid_width)
    blocks_y = min(blocks, grid_height)
    y_thickness = centered_indices(grid_height, min(thickness, grid_height))
    x_thickness = centered_indices(grid_width, min(thickness, grid_width))

    points = _horizontal_arm(
        edge_indices(grid_width, blocks_x, Edge.START), y_thickness, grid_width, grid_height
    )
    points += _horizontal_arm(
        edge_indices(grid_width, blocks_x, Edge.END), y_thickness, grid_width, grid_height
    )
    points += _vertical_arm(
        edge_indices(grid_height, blocks_y, Edge.END), x_thickness, grid_width, grid_height
    )
    points += _vertical_arm(
        edge_indices(grid_height, blocks_y, Edge.START), x_thickness, grid_width, grid_height
    )
    return points


def active_points(
    state: HatState, grid_width: int, grid_height: int, blocks: int, thickness: int
) -> list[tuple[float, float]]:
    """Points of the arms the hat currently points along."""
    if state.x == 0 and state.y == 0:
        return []

    blocks_x = min(blocks, grid_width)
    blocks_y = min(blocks, grid_height)
    y_thickness = centered_indices(grid_height, min(thickness, grid_height))
    x_thickness = centered_indices(grid_width, min(thickness, grid_width))

    points: list[tuple[float, float]] = []
    if state.x != 0:
        edge = Edge.START if state.x < 0 else Edge.END
        points += _horizontal_arm(
            edge_indices(grid_width, blocks_x, edge), y_thickness, grid_width, grid_height
        )
    if state.y != 0:
        edge = Edge.END if state.y > 0 else Edge.START
        points += _vertical_arm(
            edge_indices(grid_height, blocks_y, edge), x_thickness, grid_width, grid_height
        )
    return points