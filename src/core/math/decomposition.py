"""
Decomposition — Matrix <-> (scale, rotation, translation) Parameters

Solves an HMatrix for interpretable parameters and rebuilds a matrix from
them. Reconstruction fixes the canonical order: scale, then rotate, then
translate.

FORMULAS:
    scale_x = sqrt(x_scale^2 + y_skew^2)
    scale_y = sqrt(x_skew^2 + y_scale^2)
    angle   = atan(y_skew / (x_scale + EPS_DECOMPOSE))
    dx, dy  = passed through

    reconstruct(sx, sy, θ, dx, dy) = translation(dx, dy) · rotation(θ) · scaling(sx, sy)

KNOWN LIMITATIONS:
1. Negative scale factors are lost (scale_x, scale_y >= 0)
2. One-argument atan: angle lies in (-pi/2, pi/2]. Rotations outside that
   half-plane do not reconstruct to the original matrix
3. Independent shear is not modelled; decomposition is a similarity
   approximation and may be meaningless for general affine matrices
4. Near x_scale == 0 the epsilon offset reduces precision instead of raising;
   at x_scale == -eps the denominator is exactly 0 and the angle is +-pi/2
   (NaN when y_skew is also 0), as IEEE division gives
"""

import logging
import math
import numbers
from typing import Any, NamedTuple

from src.core.domain.hmatrix import HMatrix
from src.core.math import scalar
from src.core.math.numerical_safeguards import EPS_DECOMPOSE, is_zero
from src.core.math.transforms import compose_chain, rotation, scaling, translation

logger = logging.getLogger(__name__)


class TransformParams(NamedTuple):
    """
    Similarity parameters of a matrix, in reconstruct() argument order.

    Fields share the scalar type of the decomposed HMatrix.
    """

    scale_x: Any
    scale_y: Any
    angle: Any  # radians, [-pi/2, pi/2]
    dx: Any
    dy: Any


def _atan_ratio(num, denom):
    """
    atan(num / denom) with IEEE semantics for a zero real denominator.

    x_scale == -eps makes the offset denominator exactly 0.0: the ratio is
    then +-Inf (angle +-pi/2) or NaN for 0/0, never ZeroDivisionError.
    """
    if isinstance(num, numbers.Real) and isinstance(denom, numbers.Real) and denom == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.pi / 2, num) * math.copysign(1.0, denom)
    return scalar.atan(num / denom)


def decompose(m: HMatrix, eps: float = EPS_DECOMPOSE) -> TransformParams:
    """
    Extract (scale_x, scale_y, angle, dx, dy) from a matrix.

    There may be multiple solutions; this returns the one with non-negative
    scales and the angle given by the one-argument arctangent. Always
    succeeds.

    Args:
        m: Matrix to decompose
        eps: Offset added to the x_scale denominator (default: EPS_DECOMPOSE)

    Returns:
        TransformParams

    Examples:
        >>> decompose(translation(5.0, 7.0))
        TransformParams(scale_x=1.0, scale_y=1.0, angle=0.0, dx=5.0, dy=7.0)
    """
    scale_x = scalar.sqrt(m.x_scale * m.x_scale + m.y_skew * m.y_skew)
    scale_y = scalar.sqrt(m.x_skew * m.x_skew + m.y_scale * m.y_scale)

    if isinstance(m.x_scale, numbers.Real) and is_zero(m.x_scale):
        logger.debug("decompose: x_scale=%r, angle limited by eps=%g", m.x_scale, eps)

    # eps prevents atan(0/0) = NaN
    angle = _atan_ratio(m.y_skew, m.x_scale + eps)

    return TransformParams(scale_x, scale_y, angle, m.dx, m.dy)


def reconstruct(scale_x, scale_y, angle, dx, dy) -> HMatrix:
    """
    Rebuild a matrix from similarity parameters: scale, then rotate, then translate.

    Total over real inputs. decompose(reconstruct(...)) recovers the inputs
    when scale_x, scale_y > 0 and angle lies in (-pi/2, pi/2).

    Examples:
        >>> from src.core.math.transforms import apply
        >>> apply(reconstruct(2.0, 3.0, 0.0, 5.0, 7.0), (1.0, 1.0))
        Pt2(x=7.0, y=10.0)
    """
    return compose_chain([translation(dx, dy), rotation(angle), scaling(scale_x, scale_y)])
