"""Command line entry point for share-card export.

Usage:
    tendance-export PAYLOAD [--module NAME] [--subgroup NAME ...]
                            [--exam-type TYPE ...] [--year YEAR ...]
                            [--preset {all,emd,rattrapage}]
                            [--output-dir DIR] [--list-modules] [-v]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tendance_toolkit import __version__
from tendance_toolkit.controller import ExportConfig, ExportError, export_share_card
from tendance_toolkit.core.models import FilterSelection
from tendance_toolkit.core.schemas import ValidationError
from tendance_toolkit.core.utils import load_payload, serialize_module
from tendance_toolkit.statistics import (
    ExamTypePreset,
    aggregate,
    exam_type_preset,
    project_modules,
)

logger = logging.getLogger("tendance_toolkit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tendance-export",
        description="Rank exam topics and export a module's SVG share card.",
    )
    parser.add_argument("payload", type=Path, help="Tendance JSON payload")
    parser.add_argument("--module", help="Module to export (default: first in payload)")
    parser.add_argument("--subgroup", action="append", default=[], dest="subgroups",
                        help="Sub-group to include; repeat for several (default: all)")
    parser.add_argument("--exam-type", action="append", default=[], dest="exam_types",
                        help="Exam type to keep; repeat for several (default: all)")
    parser.add_argument("--year", action="append", default=[], type=int, dest="exam_years",
                        help="Exam year to keep; repeat for several (default: all)")
    parser.add_argument("--preset", choices=[p.value for p in ExamTypePreset],
                        help="Exam-type preset over the payload's available types")
    parser.add_argument("--output-dir", type=Path, default=Path("."),
                        help="Directory for the SVG file (default: current directory)")
    parser.add_argument("--list-modules", action="store_true",
                        help="Print ranked modules as JSON instead of exporting")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _list_modules(args: argparse.Namespace) -> int:
    try:
        payload = load_payload(args.payload)
    except (OSError, ValidationError) as e:
        logger.error(f"Failed to load payload: {e}")
        return 1

    exam_types = args.exam_types
    if args.preset:
        exam_types = exam_type_preset(payload.available_exam_types, ExamTypePreset(args.preset))
    topics = aggregate(payload.records, FilterSelection.from_sets(exam_types, args.exam_years))
    modules = [serialize_module(m) for m in project_modules(topics)]
    print(json.dumps(modules, ensure_ascii=False, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.list_modules:
        return _list_modules(args)

    try:
        config = ExportConfig(
            payload_path=args.payload,
            output_dir=args.output_dir,
            module=args.module,
            subgroups=args.subgroups,
            exam_types=args.exam_types,
            exam_years=args.exam_years,
            preset=ExamTypePreset(args.preset) if args.preset else None,
        )
        result = export_share_card(config)
    except (ExportError, ValueError) as e:
        logger.error(f"Export failed: {e}")
        return 1

    print(result.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
