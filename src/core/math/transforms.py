"""
Transforms — Construction, Composition & Application of 2D Affine Matrices

Operations on HMatrix values:
- Canonical transforms: rotation, translation, scaling, rotation about a point
- Composition of two matrices and of ordered chains
- Application to points and polygons
- Distance between matrices (for near-equality and optimisation residuals)

CRITICAL INVARIANTS:
1. compose(t1, t2) = t1 · t2: t2 is applied FIRST, then t1
2. compose_chain([t1, ..., tn]) is a right fold seeded with identity():
   tn is applied first, t1 last
3. Every constructor that combines transforms goes through compose_chain
4. All functions are pure; inputs are never mutated

FORMULAS:
    (t1 · t2).x_scale = t1.x_scale*t2.x_scale + t1.x_skew*t2.y_skew
    (t1 · t2).x_skew  = t1.x_scale*t2.x_skew  + t1.x_skew*t2.y_scale
    (t1 · t2).y_skew  = t1.y_skew*t2.x_scale  + t1.y_scale*t2.y_skew
    (t1 · t2).y_scale = t1.y_skew*t2.x_skew   + t1.y_scale*t2.y_scale
    (t1 · t2).dx      = t1.x_scale*t2.dx + t1.x_skew*t2.dy + t1.dx
    (t1 · t2).dy      = t1.y_scale*t2.dy + t1.y_skew*t2.dx + t1.dy

    apply(m, (x, y)) = (x*x_scale + y*x_skew + dx, x*y_skew + y*y_scale + dy)
"""

import logging
from dataclasses import replace
from typing import Iterable

from src.core.domain.hmatrix import HMatrix, Pt2, identity, to_list
from src.core.math import scalar
from src.core.math.numerical_safeguards import EPS_MATRIX_CLOSE, euclidean_norm

logger = logging.getLogger(__name__)


# =============================================================================
# CANONICAL TRANSFORMS
# =============================================================================


def rotation(angle) -> HMatrix:
    """
    Pure rotation by `angle` radians, counter-clockwise with y pointing up.

    Callers working in y-down screen coordinates must negate the angle.

    Examples:
        >>> m = rotation(0.0)
        >>> (m.x_scale, m.x_skew, m.y_skew, m.y_scale)
        (1.0, -0.0, 0.0, 1.0)
    """
    c = scalar.cos(angle)
    s = scalar.sin(angle)
    return replace(identity(), x_scale=c, x_skew=-s, y_skew=s, y_scale=c)


def translation(dx, dy) -> HMatrix:
    """Identity with translation (dx, dy)."""
    return replace(identity(), dx=dx, dy=dy)


def scaling(sx, sy) -> HMatrix:
    """
    Axis-aligned scaling.

    No bounds check: zero or negative factors give degenerate or flipped
    transforms.
    """
    return replace(identity(), x_scale=sx, y_scale=sy)


def rotation_about(angle, center) -> HMatrix:
    """
    Rotation by `angle` radians around `center`.

    Moves center to the origin, rotates, then moves it back:
        translation(center) · rotation(angle) · translation(-center)

    Args:
        angle: Rotation angle in radians
        center: (x, y) fixed point of the rotation

    Returns:
        New HMatrix leaving `center` in place
    """
    cx, cy = center
    return compose_chain([translation(cx, cy), rotation(angle), translation(-cx, -cy)])


# =============================================================================
# COMPOSITION
# =============================================================================


def compose(t1: HMatrix, t2: HMatrix) -> HMatrix:
    """
    Matrix product t1 · t2: apply t2 first, then t1.

    Composition is not commutative; the argument order is part of the
    contract.

    Args:
        t1: Outer transform (applied last)
        t2: Inner transform (applied first)

    Returns:
        New HMatrix equal to t1 · t2
    """
    return HMatrix(
        x_scale=t1.x_scale * t2.x_scale + t1.x_skew * t2.y_skew,
        x_skew=t1.x_scale * t2.x_skew + t1.x_skew * t2.y_scale,
        y_skew=t1.y_skew * t2.x_scale + t1.y_scale * t2.y_skew,
        y_scale=t1.y_skew * t2.x_skew + t1.y_scale * t2.y_scale,
        dx=t1.x_scale * t2.dx + t1.x_skew * t2.dy + t1.dx,
        dy=t1.y_scale * t2.dy + t1.y_skew * t2.dx + t1.dy,
    )


def compose_chain(transforms: Iterable[HMatrix]) -> HMatrix:
    """
    Compose transforms in RIGHT TO LEFT order.

    [t1, t2, t3] means "do t3, then t2, then t1", i.e. t1 · t2 · t3.
    Folds from the rightmost element inward, starting from identity():

        compose(t1, compose(t2, compose(t3, identity())))

    Args:
        transforms: Matrices, outermost first

    Returns:
        Composite matrix (identity() for an empty chain)
    """
    chain = list(transforms)
    logger.debug("compose_chain over %d transforms", len(chain))

    result = identity()
    for t in reversed(chain):
        result = compose(t, result)
    return result


# =============================================================================
# APPLICATION
# =============================================================================


def apply(m: HMatrix, point) -> Pt2:
    """
    Apply a matrix to a point.

    Examples:
        >>> apply(translation(1.0, 2.0), (0.0, 0.0))
        Pt2(x=1.0, y=2.0)
    """
    x, y = point
    return Pt2(
        x * m.x_scale + y * m.x_skew + m.dx,
        x * m.y_skew + y * m.y_scale + m.dy,
    )


def apply_to_polygon(m: HMatrix, points: Iterable) -> list[Pt2]:
    """Apply a matrix to every vertex, preserving order and length."""
    return [apply(m, p) for p in points]


# =============================================================================
# DISTANCE
# =============================================================================


def distance(t1: HMatrix, t2: HMatrix):
    """
    Euclidean norm of the elementwise difference of the 6-element list forms.

    Sensitive to parameterisation rather than geometric effect: it is not a
    metric on the transform group, only a residual.
    """
    return euclidean_norm(a - b for a, b in zip(to_list(t1), to_list(t2)))


def are_close(t1: HMatrix, t2: HMatrix, tol: float = EPS_MATRIX_CLOSE) -> bool:
    """True if distance(t1, t2) <= tol."""
    return distance(t1, t2) <= tol
