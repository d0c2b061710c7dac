"""Minimum-area rule checks for habitat zones."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from .errors import InvalidMissionContext
from .geometry import compute_geometry
from .models import Assessment, CheckResult, HabitatDesign, MissionContext, Zone
from .rules import RULES, required_area

logger = logging.getLogger(__name__)


def _check_mission(mission: MissionContext) -> None:
    if mission.crew_size <= 0:
        raise InvalidMissionContext(f"Crew size must be > 0 (got {mission.crew_size}).")
    if mission.mission_days <= 0:
        raise InvalidMissionContext(
            f"Mission duration must be > 0 days (got {mission.mission_days})."
        )


def _zone_lookup(zones: Sequence[Zone]) -> Dict[str, Zone]:
    # later zones shadow earlier ones with the same name
    return {zone.name: zone for zone in zones}


def total_zone_area(zones: Sequence[Zone]) -> float:
    return sum(zone.area_m2 for zone in zones)


def evaluate(
    zones: Sequence[Zone],
    mission: MissionContext,
    floor_area: float,
) -> List[CheckResult]:
    """Check zones against the rule table, then total area against the floor.

    One result per rule in table order, followed by the floor-area check.
    Missing zones are reported as failed checks, not raised.
    """

    _check_mission(mission)
    zone_by_name = _zone_lookup(zones)
    results: List[CheckResult] = []

    for name, rule in RULES.items():
        zone = zone_by_name.get(name)
        if zone is None:
            results.append(CheckResult(ok=False, message=f"Missing zone: {name}", rule=name))
            continue

        required = required_area(rule, mission)
        area = zone.area_m2
        if area < required:
            message = f"{name} TOO SMALL: {area:.1f} m^2 < required {required:.1f} m^2"
        else:
            message = f"{name} OK: {area:.1f} m^2 >= required {required:.1f} m^2"
        results.append(
            CheckResult(
                ok=area >= required,
                message=message,
                rule=name,
                actual_m2=area,
                required_m2=required,
            )
        )

    total = total_zone_area(zones)
    if total > floor_area:
        results.append(
            CheckResult(
                ok=False,
                message=(
                    f"TOTAL AREA EXCEEDS USABLE FLOOR AREA: {total:.1f} m^2 > "
                    f"floor {floor_area:.1f} m^2"
                ),
                actual_m2=total,
                required_m2=floor_area,
            )
        )
    else:
        results.append(
            CheckResult(
                ok=True,
                message=f"Total zones {total:.1f} m^2 within floor area {floor_area:.1f} m^2",
                actual_m2=total,
                required_m2=floor_area,
            )
        )

    logger.debug(
        "evaluated %d zones for crew=%d days=%d: %d failing checks",
        len(zones),
        mission.crew_size,
        mission.mission_days,
        sum(1 for r in results if not r.ok),
    )
    return results


def assess(design: HabitatDesign) -> Assessment:
    """Recompute geometry and rule checks for a whole design."""

    geometry = compute_geometry(design.shape)
    checks = evaluate(design.zones, design.mission, geometry.floor_area_m2)
    return Assessment(
        geometry=geometry,
        total_zone_area_m2=total_zone_area(design.zones),
        checks=checks,
        passed=all(check.ok for check in checks),
    )
