"""Core data models for habitat floor plans."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

ZoneId = Union[int, str]


class ShapeDescriptor(BaseModel):
    """Habitat shell preset plus its two length parameters.

    ``kind`` is kept exactly as given; the engine rejects unknown kinds and
    non-positive dimensions when it computes, so callers see the domain
    errors rather than a parse failure.
    """

    model_config = ConfigDict(frozen=True)

    kind: str
    primary_dimension: float
    secondary_dimension: float


class Zone(BaseModel):
    """Named functional area inside the habitat."""

    model_config = ConfigDict(populate_by_name=True)

    id: ZoneId
    name: str = Field(..., min_length=1)
    area_m2: float = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("area_m2", "area", "areaM2"),
        serialization_alias="area",
    )


class MissionContext(BaseModel):
    """Crew size and mission length; both checked by the evaluator."""

    model_config = ConfigDict(frozen=True)

    crew_size: int
    mission_days: int


class CheckResult(BaseModel):
    """One pass/fail verdict in report order."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    message: str
    rule: Optional[str] = None
    actual_m2: Optional[float] = None
    required_m2: Optional[float] = None


class GeometrySummary(BaseModel):
    volume_m3: float
    floor_area_m2: float


class Assessment(BaseModel):
    """Geometry plus rule report for one design."""

    geometry: GeometrySummary
    total_zone_area_m2: float
    checks: List[CheckResult]
    passed: bool

    @property
    def failures(self) -> List[CheckResult]:
        return [check for check in self.checks if not check.ok]


class HabitatDesign(BaseModel):
    """Complete editable design: shell, mission and zones."""

    shape_name: Optional[str] = None
    shape: ShapeDescriptor
    mission: MissionContext
    zones: List[Zone] = Field(default_factory=list)


class SessionSettings(BaseModel):
    """Defaults and input ranges used by the editing session."""

    min_crew: int = 1
    max_crew: int = 12
    default_preset: str = "Cylinder"
    default_crew: int = 4
    default_mission_days: int = 180
    new_zone_name: str = "New"
    new_zone_area_m2: float = Field(2.0, ge=0)
