"""
Easing Module

Named easing curves ("Sine_In", "Back_OutIn", ...) as cubic Bezier control
points, evaluated through the exact Bezier bridge.

Only the In and InOut control points are tabulated. Out mirrors In through the
point (1/2, 1/2) and OutIn swaps the axes of InOut.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import List, Mapping, Tuple

import bezier
from bezier import BezierControls

TYPES: Tuple[str, ...] = ("Linear", "Sine", "Quad", "Cubic", "Quart", "Quint", "Expo", "Circ", "Back")
DIRECTIONS: Tuple[str, ...] = ("In", "Out", "InOut", "OutIn")

_IN: Mapping[str, BezierControls] = MappingProxyType({
    "Linear": BezierControls(0.00, 0.00, 1.00, 1.00),
    "Sine": BezierControls(0.12, 0.00, 0.39, 0.00),
    "Quad": BezierControls(0.11, 0.00, 0.50, 0.00),
    "Cubic": BezierControls(0.32, 0.00, 0.67, 0.00),
    "Quart": BezierControls(0.50, 0.00, 0.75, 0.00),
    "Quint": BezierControls(0.64, 0.00, 0.78, 0.00),
    "Expo": BezierControls(0.70, 0.00, 0.84, 0.00),
    "Circ": BezierControls(0.55, 0.00, 1.00, 0.45),
    "Back": BezierControls(0.36, 0.00, 0.66, -0.56),
})

_IN_OUT: Mapping[str, BezierControls] = MappingProxyType({
    "Linear": BezierControls(0.00, 0.00, 1.00, 1.00),
    "Sine": BezierControls(0.37, 0.00, 0.63, 1.00),
    "Quad": BezierControls(0.45, 0.00, 0.55, 1.00),
    "Cubic": BezierControls(0.65, 0.00, 0.35, 1.00),
    "Quart": BezierControls(0.76, 0.00, 0.24, 1.00),
    "Quint": BezierControls(0.83, 0.00, 0.17, 1.00),
    "Expo": BezierControls(0.87, 0.00, 0.13, 1.00),
    "Circ": BezierControls(0.85, 0.00, 0.15, 1.00),
    "Back": BezierControls(0.68, -0.60, 0.32, 1.60),
})


def _mirror(c: BezierControls) -> BezierControls:
    return BezierControls(1 - c.x2, 1 - c.y2, 1 - c.x1, 1 - c.y1)


def _swap_axes(c: BezierControls) -> BezierControls:
    return BezierControls(c.y1, c.x1, c.y2, c.x2)


def _build_table() -> Mapping[str, BezierControls]:
    table = {}
    for kind in TYPES:
        table[f"{kind}_In"] = _IN[kind]
        table[f"{kind}_Out"] = _mirror(_IN[kind])
        table[f"{kind}_InOut"] = _IN_OUT[kind]
        table[f"{kind}_OutIn"] = _swap_axes(_IN_OUT[kind])
    return MappingProxyType(table)


CONTROL_POINTS = _build_table()


def get_list() -> List[str]:
    """Every curve name, types in table order, each with all four directions."""
    return [f"{kind}_{direction}" for kind in TYPES for direction in DIRECTIONS]


def is_valid(name: str) -> bool:
    return name in CONTROL_POINTS


def control_points(name: str) -> BezierControls:
    try:
        return CONTROL_POINTS[name]
    except KeyError:
        raise ValueError(f"unknown easing function {name!r}") from None


def convert(name: str, x: float) -> List[float]:
    """Eased value(s) of progress x in [0, 1]."""
    controls = control_points(name)
    if x == 0:
        return [0.0]
    if x == 1:
        return [1.0]
    return bezier.convert(x, controls)


def invert(name: str, y: float) -> List[float]:
    """Progress value(s) x that ease to y."""
    controls = control_points(name)
    if y == 0:
        return [0.0]
    if y == 1:
        return [1.0]
    return bezier.invert(y, controls)
