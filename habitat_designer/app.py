"""Flask JSON API used by the browser editor."""

from __future__ import annotations

from io import BytesIO
from typing import Any

from flask import Flask, jsonify, request, send_file

from .evaluator import assess
from .geometry import compute_geometry
from .io_schema import DEFAULT_EXPORT_NAME, design_from_document, export_json, export_markdown
from .models import HabitatDesign, ShapeDescriptor
from .presets import preset, preset_names
from .rules import rule_table

app = Flask(__name__)


def _payload_field(name: str) -> Any:
    payload = request.get_json(force=True, silent=True)
    data = payload.get(name) if isinstance(payload, dict) else None
    if not data:
        raise ValueError(f"{name} payload required")
    return data


def _design_payload() -> HabitatDesign:
    return design_from_document(_payload_field("design"))


@app.errorhandler(ValueError)
def _bad_input(exc: ValueError):
    return jsonify({"error": str(exc)}), 400


@app.route("/api/presets", methods=["GET"])
def list_presets():
    presets = []
    for name in preset_names():
        shape = preset(name)
        geometry = compute_geometry(shape)
        presets.append(
            {
                "name": name,
                "shape": shape.kind,
                "dimensions": {"w": shape.primary_dimension, "h": shape.secondary_dimension},
                "volume": geometry.volume_m3,
                "floorArea": geometry.floor_area_m2,
            }
        )
    return jsonify(presets)


@app.route("/api/rules", methods=["GET"])
def list_rules():
    return jsonify([{"zone": name, **rule} for name, rule in rule_table().items()])


@app.route("/api/geometry", methods=["POST"])
def geometry_route():
    shape_data = _payload_field("shape")
    geometry = compute_geometry(ShapeDescriptor.model_validate(shape_data))
    return jsonify({"volume": geometry.volume_m3, "floorArea": geometry.floor_area_m2})


@app.route("/api/assess", methods=["POST"])
def assess_route():
    design = _design_payload()
    assessment = assess(design)
    return jsonify(
        {
            "volume": assessment.geometry.volume_m3,
            "floorArea": assessment.geometry.floor_area_m2,
            "totalArea": assessment.total_zone_area_m2,
            "passed": assessment.passed,
            "checks": [check.model_dump() for check in assessment.checks],
        }
    )


@app.route("/api/export", methods=["POST"])
def export_route():
    design = _design_payload()
    fmt = request.args.get("format", "json")
    if fmt == "md":
        return jsonify({"markdown": export_markdown(design, assess(design))})
    if fmt != "json":
        return jsonify({"error": f"Unsupported export format: {fmt}"}), 400
    buffer = BytesIO(export_json(design).encode("utf-8"))
    return send_file(
        buffer,
        mimetype="application/json",
        as_attachment=True,
        download_name=DEFAULT_EXPORT_NAME,
    )


if __name__ == "__main__":  # pragma: no cover
    app.run(host="0.0.0.0", port=5000, debug=False)
