"""Command line interface for the habitat designer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .evaluator import assess
from .geometry import compute_geometry
from .io_schema import (
    DEFAULT_EXPORT_NAME,
    assessment_schema,
    design_schema,
    export_csv,
    export_json,
    export_markdown,
    export_schema,
    load_design,
    save_export,
)
from .presets import default_design, preset, preset_names


def _emit(text: str, out: str | None) -> None:
    if out:
        Path(out).write_text(text)
    else:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")


def cmd_init(args: argparse.Namespace) -> int:
    path = Path(args.out or DEFAULT_EXPORT_NAME)
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    save_export(default_design(), path)
    print(f"Wrote starting design to {path}")
    return 0


def cmd_presets(args: argparse.Namespace) -> int:
    for name in preset_names():
        shape = preset(name)
        geometry = compute_geometry(shape)
        print(
            f"{name}: {shape.kind} {shape.primary_dimension:g} x {shape.secondary_dimension:g} m, "
            f"volume {geometry.volume_m3:.1f} m³, floor {geometry.floor_area_m2:.1f} m²"
        )
    return 0


def cmd_evaluate(args: argparse.Namespace) -> int:
    design = load_design(args.input)
    assessment = assess(design)
    print(f"Volume: {assessment.geometry.volume_m3:.1f} m³")
    print(f"Floor area (approx): {assessment.geometry.floor_area_m2:.1f} m²")
    for check in assessment.checks:
        print(f"[{'OK' if check.ok else 'FAIL'}] {check.message}")
    return 0 if assessment.passed else 1


def cmd_export(args: argparse.Namespace) -> int:
    design = load_design(args.input)
    assessment = assess(design)

    if args.format == "json":
        _emit(export_json(design, assessment.geometry), args.out)
    elif args.format == "md":
        _emit(export_markdown(design, assessment), args.out)
    elif args.format == "csv":
        _emit(export_csv(assessment), args.out)
    else:
        raise ValueError(f"Unsupported export format: {args.format}")
    return 0


def cmd_schema(args: argparse.Namespace) -> int:
    if args.target == "design":
        data = design_schema()
    elif args.target == "export":
        data = export_schema()
    elif args.target == "assessment":
        data = assessment_schema()
    else:
        raise ValueError("Unknown schema target")
    print(json.dumps(data, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="habitat-designer")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command")

    p_init = sub.add_parser("init", help="write the starting design")
    p_init.add_argument("--out", default=None)
    p_init.set_defaults(func=cmd_init)

    p_presets = sub.add_parser("presets", help="list shell presets")
    p_presets.set_defaults(func=cmd_presets)

    p_eval = sub.add_parser("evaluate", help="run rule checks on a design")
    p_eval.add_argument("--in", dest="input", required=True)
    p_eval.set_defaults(func=cmd_evaluate)

    p_exp = sub.add_parser("export", help="export design summary")
    p_exp.add_argument("--in", dest="input", required=True)
    p_exp.add_argument("--format", choices=["json", "md", "csv"], required=True)
    p_exp.add_argument("--out", default=None)
    p_exp.set_defaults(func=cmd_export)

    p_schema = sub.add_parser("schema", help="print JSON schema")
    p_schema.add_argument("--target", choices=["design", "export", "assessment"], required=True)
    p_schema.set_defaults(func=cmd_schema)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    try:
        return int(args.func(args))
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
