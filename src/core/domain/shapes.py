"""
Shapes — Canonical polygons and placeholder polygon energy.
"""

from typing import Final, Sequence

from src.core.domain.hmatrix import Pt2

# Axis-aligned square of side 1 centred at the origin, counter-clockwise
UNIT_SQUARE: Final[tuple[Pt2, ...]] = (
    Pt2(0.5, 0.5),
    Pt2(-0.5, 0.5),
    Pt2(-0.5, -0.5),
    Pt2(0.5, -0.5),
)


def first_vertex_energy(p1: Sequence, p2: Sequence):
    """
    Squared distance between the first vertices of two polygons.

    Test objective for optimisation callers: drives the two shapes to touch
    at their first vertex.

    Raises:
        ValueError: if either polygon is empty
    """
    if not p1 or not p2:
        raise ValueError(f"polygons must be non-empty, got {len(p1)} and {len(p2)} vertices")

    (x1, y1), (x2, y2) = p1[0], p2[0]
    ddx = x1 - x2
    ddy = y1 - y2
    return ddx * ddx + ddy * ddy
