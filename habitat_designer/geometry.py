"""Volume and usable floor area for habitat shell presets.

The floor areas are design approximations, not physical floors:

* sphere uses the great-circle area of the shell;
* ellipsoid uses ``pi * a * c`` from the primary and secondary semi-axes,
  which is not the true equatorial ellipse.

Rule thresholds are calibrated against these exact figures, so keep the
formulas as they are.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Tuple

from .errors import InvalidDimension, InvalidShapeKind
from .models import GeometrySummary, ShapeDescriptor

logger = logging.getLogger(__name__)

# Box shells have no height parameter; assume a fixed ceiling.
BOX_CEILING_HEIGHT_M = 2.5


def _cylinder(primary: float, secondary: float) -> Tuple[float, float]:
    r = primary / 2
    floor = math.pi * r * r
    return floor * secondary, floor


def _sphere(primary: float, secondary: float) -> Tuple[float, float]:
    r = primary / 2
    return (4 / 3) * math.pi * r * r * r, math.pi * r * r


def _ellipsoid(primary: float, secondary: float) -> Tuple[float, float]:
    a = b = primary / 2
    c = secondary / 2
    return (4 / 3) * math.pi * a * b * c, math.pi * a * c


def _box(primary: float, secondary: float) -> Tuple[float, float]:
    floor = primary * secondary
    return floor * BOX_CEILING_HEIGHT_M, floor


# kind -> (volume, floor area)
FORMULAS: Dict[str, Callable[[float, float], Tuple[float, float]]] = {
    "cylinder": _cylinder,
    "sphere": _sphere,
    "ellipsoid": _ellipsoid,
    "box": _box,
}


def _check_dimension(name: str, value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidDimension(name, value) from exc
    if not math.isfinite(number) or number <= 0:
        raise InvalidDimension(name, value)
    return number


def _measure(shape: ShapeDescriptor) -> Tuple[float, float]:
    formula = FORMULAS.get(shape.kind)
    if formula is None:
        raise InvalidShapeKind(shape.kind)
    primary = _check_dimension("primary_dimension", shape.primary_dimension)
    secondary = _check_dimension("secondary_dimension", shape.secondary_dimension)
    return formula(primary, secondary)


def compute_volume(shape: ShapeDescriptor) -> float:
    """Enclosed volume of the shell in cubic length-units."""

    return _measure(shape)[0]


def compute_floor_area(shape: ShapeDescriptor) -> float:
    """Approximate usable floor area of the shell in square length-units."""

    return _measure(shape)[1]


def compute_geometry(shape: ShapeDescriptor) -> GeometrySummary:
    volume, floor_area = _measure(shape)
    logger.debug(
        "geometry %s %.3fx%.3f: volume=%.3f floor=%.3f",
        shape.kind,
        shape.primary_dimension,
        shape.secondary_dimension,
        volume,
        floor_area,
    )
    return GeometrySummary(volume_m3=volume, floor_area_m2=floor_area)
