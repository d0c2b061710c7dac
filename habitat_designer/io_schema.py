"""JSON export/import and report helpers."""

from __future__ import annotations

import csv
import json
from io import StringIO
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidShapeKind
from .evaluator import total_zone_area
from .geometry import compute_geometry
from .models import (
    Assessment,
    GeometrySummary,
    HabitatDesign,
    MissionContext,
    ShapeDescriptor,
    Zone,
)
from .presets import PRESETS

DEFAULT_EXPORT_NAME = "habitat_layout.json"


class Dimensions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    w: float = Field(..., validation_alias=AliasChoices("w", "width"))
    h: float = Field(..., validation_alias=AliasChoices("h", "height"))
    type: Optional[str] = None


class ExportDocument(BaseModel):
    """Exported design snapshot, written with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    shape: Optional[str] = None
    shape_name: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("shapeName", "shape_name"),
        serialization_alias="shapeName",
    )
    dimensions: Dimensions
    crew: int
    mission_days: int = Field(
        ...,
        validation_alias=AliasChoices("missionDays", "days", "mission_days"),
        serialization_alias="missionDays",
    )
    zones: List[Zone] = Field(default_factory=list)
    total_area: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("totalArea", "total_area"),
        serialization_alias="totalArea",
    )
    volume: Optional[float] = None
    floor_area: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("floorArea", "floor_area"),
        serialization_alias="floorArea",
    )


def build_export(design: HabitatDesign, geometry: GeometrySummary | None = None) -> ExportDocument:
    geometry = geometry or compute_geometry(design.shape)
    return ExportDocument(
        shape=design.shape.kind,
        shape_name=design.shape_name,
        dimensions=Dimensions(
            w=design.shape.primary_dimension,
            h=design.shape.secondary_dimension,
        ),
        crew=design.mission.crew_size,
        mission_days=design.mission.mission_days,
        zones=list(design.zones),
        total_area=total_zone_area(design.zones),
        volume=geometry.volume_m3,
        floor_area=geometry.floor_area_m2,
    )


def export_payload(design: HabitatDesign, geometry: GeometrySummary | None = None) -> Dict[str, Any]:
    return build_export(design, geometry).model_dump(by_alias=True, exclude_none=True)


def export_json(design: HabitatDesign, geometry: GeometrySummary | None = None) -> str:
    return json.dumps(export_payload(design, geometry), indent=2)


def save_export(design: HabitatDesign, path: Path | str = DEFAULT_EXPORT_NAME) -> Path:
    target = Path(path)
    target.write_text(export_json(design))
    return target


def _shape_kind(doc: ExportDocument) -> str:
    if doc.shape:
        return doc.shape
    if doc.dimensions.type:
        return doc.dimensions.type
    if doc.shape_name in PRESETS:
        return PRESETS[doc.shape_name][0]
    raise InvalidShapeKind(doc.shape_name)


def design_from_document(data: Dict[str, Any]) -> HabitatDesign:
    """Rebuild an editable design from an exported document.

    Derived figures (volume, floor area, total area) are ignored; they are
    recomputed on the next assessment.
    """

    try:
        doc = ExportDocument.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Design document invalid: {exc}") from exc
    return HabitatDesign(
        shape_name=doc.shape_name,
        shape=ShapeDescriptor(
            kind=_shape_kind(doc),
            primary_dimension=doc.dimensions.w,
            secondary_dimension=doc.dimensions.h,
        ),
        mission=MissionContext(crew_size=doc.crew, mission_days=doc.mission_days),
        zones=doc.zones,
    )


def load_design(path: Path | str) -> HabitatDesign:
    data = json.loads(Path(path).read_text())
    return design_from_document(data)


def design_schema() -> Dict[str, Any]:
    return HabitatDesign.model_json_schema()


def export_schema() -> Dict[str, Any]:
    return ExportDocument.model_json_schema(by_alias=True, mode="serialization")


def assessment_schema() -> Dict[str, Any]:
    return Assessment.model_json_schema()


def export_markdown(design: HabitatDesign, assessment: Assessment) -> str:
    lines: list[str] = []
    title = design.shape_name or design.shape.kind.title()
    lines.append(f"# {title} Habitat Summary")
    lines.append("")
    lines.append(
        f"- Shape: {design.shape.kind} "
        f"({design.shape.primary_dimension:g} x {design.shape.secondary_dimension:g} m)"
    )
    lines.append(f"- Crew: {design.mission.crew_size}")
    lines.append(f"- Duration: {design.mission.mission_days} days")
    lines.append(f"- Volume: {assessment.geometry.volume_m3:.1f} m³")
    lines.append(f"- Floor area (approx): {assessment.geometry.floor_area_m2:.1f} m²")
    lines.append("")
    lines.append("## Zones")
    lines.append("| Id | Zone | Area (m²) |")
    lines.append("| --- | --- | --- |")
    for zone in design.zones:
        lines.append(f"| {zone.id} | {zone.name} | {zone.area_m2:.1f} |")
    lines.append(f"| | **Total** | {assessment.total_zone_area_m2:.1f} |")
    lines.append("")
    lines.append("## Rule checks")
    for check in assessment.checks:
        prefix = "✅" if check.ok else "⚠️"
        lines.append(f"- {prefix} {check.message}")
    return "\n".join(lines)


def export_csv(assessment: Assessment) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(["Check", "OK", "Actual (m2)", "Required (m2)", "Message"])
    for check in assessment.checks:
        writer.writerow(
            [
                check.rule or "TotalArea",
                check.ok,
                "" if check.actual_m2 is None else f"{check.actual_m2:.1f}",
                "" if check.required_m2 is None else f"{check.required_m2:.1f}",
                check.message,
            ]
        )
    return buffer.getvalue()
