"""
Bezier Bridge Module

Maps between the two axes of a CSS-style cubic Bezier curve whose end points
are fixed at (0, 0) and (1, 1). On one axis with inner control ordinates c2, c3,

    p(t) = 3(1-t)^2 t c2 + 3(1-t) t^2 c3 + t^3

so recovering t from p means solving

    (3c2 - 3c3 + 1) t^3 + (3c3 - 6c2) t^2 + 3c2 t - p = 0

The cubic is set up and solved in exact arithmetic; only the final filtering
of candidate parameters is done on floats, with numpy.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

import numpy as np

import arith
import solver
from exact import ExactNumber, new
from interval import UNIT

LOG = logging.getLogger(__name__)

IMAG_TOLERANCE = 1e-9
RANGE_TOLERANCE = 1e-9

THREE = ExactNumber(3)
SIX = ExactNumber(6)


@dataclass(frozen=True)
class BezierControls:
    """Inner control points (x1, y1) and (x2, y2) of a cubic Bezier curve."""
    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self):
        for name in ("x1", "y1", "x2", "y2"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"control ordinate {name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"control ordinate {name} must be finite, got {value!r}")

    def astuple(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


Controls = Union[BezierControls, Sequence[float]]


def _as_controls(controls: Controls) -> BezierControls:
    if isinstance(controls, BezierControls):
        return controls
    return BezierControls(*controls)


def cubic_coefficients(p, c2, c3) -> Tuple[ExactNumber, ExactNumber, ExactNumber, ExactNumber]:
    """Coefficients (a, b, c, d) of a t^3 + b t^2 + c t + d = 0 for position p."""
    p, c2, c3 = new(p), new(c2), new(c3)
    a = arith.add(arith.sub(arith.mul(THREE, c2), arith.mul(THREE, c3)), arith.ONE)
    b = arith.sub(arith.mul(THREE, c3), arith.mul(SIX, c2))
    c = arith.mul(THREE, c2)
    d = arith.neg(p)
    return a, b, c, d


def bezier_position(t, c2, c3) -> ExactNumber:
    """Position on one axis at parameter t."""
    t, c2, c3 = new(t), new(c2), new(c3)
    rest = arith.sub(arith.ONE, t)
    first = arith.mul(THREE, arith.mul(arith.mul(rest, rest), arith.mul(t, c2)))
    second = arith.mul(THREE, arith.mul(rest, arith.mul(arith.mul(t, t), c3)))
    return arith.add(arith.add(first, second), arith.mul(t, arith.mul(t, t)))


def solve_parameter(p, c2, c3, imag_tol: float = IMAG_TOLERANCE, range_tol: float = RANGE_TOLERANCE) -> List[ExactNumber]:
    """
    Curve parameters t in [0, 1] at which the axis reaches position p.

    Roots with an imaginary part above imag_tol, or a real part outside
    [0, 1] widened by range_tol, are dropped. The remaining real parts are
    clamped into [0, 1] exactly.
    """
    roots = solver.solve_cubic(*cubic_coefficients(p, c2, c3))
    values = np.array([complex(root) for root in roots], dtype=complex)
    keep = np.isfinite(values) & (np.abs(values.imag) <= imag_tol) & UNIT.mask(values.real, range_tol)

    params = []
    for root, kept in zip(roots, keep):
        if kept:
            params.append(arith.max(arith.ZERO, arith.min(arith.ONE, root.real)))
    LOG.debug("position %s: %d of %d roots lie on the curve", p, len(params), len(roots))
    return params


def convert(x, controls: Controls) -> List[float]:
    """Candidate y values of the curve at horizontal position x."""
    controls = _as_controls(controls)
    params = solve_parameter(x, controls.x1, controls.x2)
    return [float(bezier_position(t, controls.y1, controls.y2)) for t in params]


def invert(y, controls: Controls) -> List[float]:
    """Candidate x values at which the curve reaches height y."""
    controls = _as_controls(controls)
    params = solve_parameter(y, controls.y1, controls.y2)
    return [float(bezier_position(t, controls.x1, controls.x2)) for t in params]
