"""Shell presets and the starting design."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .errors import InvalidShapeKind
from .models import HabitatDesign, MissionContext, SessionSettings, ShapeDescriptor, Zone

# name -> (kind, primary, secondary), dimensions in metres
PRESETS: Dict[str, Tuple[str, float, float]] = {
    "Cylinder": ("cylinder", 6.0, 8.0),  # diameter x length
    "Box": ("box", 4.0, 6.0),  # width x length
    "Sphere": ("sphere", 5.0, 5.0),
    "Inflatable": ("ellipsoid", 8.0, 4.0),
}

DEFAULT_ZONES: List[Tuple[int, str, float]] = [
    (1, "Sleep", 6.0),
    (2, "Hab", 8.0),
    (3, "ECLSS", 4.0),
]


def preset_names() -> List[str]:
    return list(PRESETS)


def preset(name: str) -> ShapeDescriptor:
    try:
        kind, primary, secondary = PRESETS[name]
    except KeyError:
        raise InvalidShapeKind(name) from None
    return ShapeDescriptor(kind=kind, primary_dimension=primary, secondary_dimension=secondary)


def default_design(settings: SessionSettings | None = None) -> HabitatDesign:
    settings = settings or SessionSettings()
    return HabitatDesign(
        shape_name=settings.default_preset,
        shape=preset(settings.default_preset),
        mission=MissionContext(
            crew_size=settings.default_crew,
            mission_days=settings.default_mission_days,
        ),
        zones=[Zone(id=zid, name=name, area_m2=area) for zid, name, area in DEFAULT_ZONES],
    )
