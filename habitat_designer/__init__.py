"""Habitat floor-plan geometry and rule-evaluation package."""

from .errors import HabitatError, InvalidDimension, InvalidMissionContext, InvalidShapeKind  # noqa: F401
from .models import CheckResult, HabitatDesign, MissionContext, ShapeDescriptor, Zone  # noqa: F401
from .geometry import compute_floor_area, compute_geometry, compute_volume  # noqa: F401
from .evaluator import assess, evaluate  # noqa: F401
from .session import DesignSession  # noqa: F401

__all__ = [
    "HabitatError",
    "InvalidDimension",
    "InvalidMissionContext",
    "InvalidShapeKind",
    "CheckResult",
    "HabitatDesign",
    "MissionContext",
    "ShapeDescriptor",
    "Zone",
    "compute_floor_area",
    "compute_geometry",
    "compute_volume",
    "assess",
    "evaluate",
    "DesignSession",
]
