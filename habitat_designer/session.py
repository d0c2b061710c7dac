"""Editable design session driven by an interface shell."""

from __future__ import annotations

import logging
from typing import Optional

from .errors import HabitatError, InvalidMissionContext
from .evaluator import assess
from .models import (
    Assessment,
    HabitatDesign,
    MissionContext,
    SessionSettings,
    ShapeDescriptor,
    Zone,
    ZoneId,
)
from .presets import default_design, preset

logger = logging.getLogger(__name__)


class DesignSession:
    """Holds the mutable design and its last good assessment.

    Every edit recomputes. If the recompute fails, the previous assessment is
    kept for display and the error is exposed through ``last_error``.
    """

    def __init__(
        self,
        design: HabitatDesign | None = None,
        settings: SessionSettings | None = None,
    ) -> None:
        self.settings = settings or SessionSettings()
        self.design = design or default_design(self.settings)
        self.assessment: Optional[Assessment] = None
        self.last_error: Optional[HabitatError] = None
        self.refresh()

    # --- recompute ---------------------------------------------------------

    def refresh(self) -> Optional[Assessment]:
        try:
            assessment = assess(self.design)
        except HabitatError as exc:
            logger.warning("Keeping last good assessment: %s", exc)
            self.last_error = exc
            return self.assessment
        self.assessment = assessment
        self.last_error = None
        return assessment

    # --- shell edits -------------------------------------------------------

    def select_preset(self, name: str) -> Optional[Assessment]:
        shape = preset(name)
        self.design = self.design.model_copy(update={"shape_name": name, "shape": shape})
        return self.refresh()

    def set_dimensions(self, primary: float, secondary: float) -> Optional[Assessment]:
        shape = ShapeDescriptor(
            kind=self.design.shape.kind,
            primary_dimension=primary,
            secondary_dimension=secondary,
        )
        self.design = self.design.model_copy(update={"shape": shape})
        return self.refresh()

    def set_crew(self, crew: int) -> Optional[Assessment]:
        if not (self.settings.min_crew <= crew <= self.settings.max_crew):
            raise InvalidMissionContext(
                f"Crew size {crew} outside supported range "
                f"{self.settings.min_crew}-{self.settings.max_crew}."
            )
        mission = MissionContext(crew_size=crew, mission_days=self.design.mission.mission_days)
        self.design = self.design.model_copy(update={"mission": mission})
        return self.refresh()

    def set_mission_days(self, days: int) -> Optional[Assessment]:
        if days <= 0:
            raise InvalidMissionContext(f"Mission duration must be > 0 days (got {days}).")
        mission = MissionContext(crew_size=self.design.mission.crew_size, mission_days=days)
        self.design = self.design.model_copy(update={"mission": mission})
        return self.refresh()

    def _next_zone_id(self) -> int:
        numeric = [z.id for z in self.design.zones if isinstance(z.id, int)]
        return max(numeric, default=0) + 1

    def add_zone(self, name: str | None = None, area_m2: float | None = None) -> Zone:
        zone = Zone(
            id=self._next_zone_id(),
            name=name if name is not None else self.settings.new_zone_name,
            area_m2=area_m2 if area_m2 is not None else self.settings.new_zone_area_m2,
        )
        self.design = self.design.model_copy(update={"zones": [*self.design.zones, zone]})
        self.refresh()
        return zone

    def _index_of(self, zone_id: ZoneId) -> int:
        for index, zone in enumerate(self.design.zones):
            if zone.id == zone_id:
                return index
        raise KeyError(f"No zone with id {zone_id!r}")

    def update_zone(
        self,
        zone_id: ZoneId,
        name: str | None = None,
        area_m2: float | None = None,
    ) -> Zone:
        index = self._index_of(zone_id)
        current = self.design.zones[index]
        # validate through the model so empty names and negative areas are rejected
        zone = Zone(
            id=current.id,
            name=name if name is not None else current.name,
            area_m2=area_m2 if area_m2 is not None else current.area_m2,
        )
        zones = list(self.design.zones)
        zones[index] = zone
        self.design = self.design.model_copy(update={"zones": zones})
        self.refresh()
        return zone

    def remove_zone(self, zone_id: ZoneId) -> Zone:
        index = self._index_of(zone_id)
        zones = list(self.design.zones)
        removed = zones.pop(index)
        self.design = self.design.model_copy(update={"zones": zones})
        self.refresh()
        return removed
