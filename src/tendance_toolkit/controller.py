"""
Module: controller

Purpose:
    Orchestrate the share-card export pipeline.
    Load → Filter → Aggregate → Project → Plan → Render → Write

Key Functions:
    - build_share_card(): In-memory card for one module and its sub-groups
    - export_share_card(): Full pipeline from payload file to SVG file

Key Classes:
    - ExportConfig: Export parameters
    - ShareCard: Rendered card with its plan and data
    - ExportResult: Written file plus diagnostics
    - ExportError: Exception for export refusals and failures

Dependencies:
    - core.utils.serialization: Payload loading
    - statistics: Aggregation and projection
    - layout: Planning
    - output: Rendering and writing

Used By:
    - tendance_toolkit.cli: Command line
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from tendance_toolkit.core.models import AggregatedTopic, FilterSelection, ShareCardData
from tendance_toolkit.core.schemas import ValidationError
from tendance_toolkit.core.utils import load_payload

from .statistics import (
    ExamTypePreset,
    RankingConfig,
    aggregate,
    build_share_card_data,
    default_module,
    exam_type_preset,
    project_modules,
    resolve_selected_module,
)
from .layout import LayoutConfig, LayoutPlan, plan_layout
from .output import RenderTheme, export_filename, render_svg, write_svg

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Error during share-card export."""
    pass


@dataclass(frozen=True)
class ShareCard:
    """
    Rendered share card (immutable).

    Attributes:
        filename: Conventional file name for the card
        document: SVG text
        plan: Layout the document was rendered from
        data: Ranked data the plan was built from
    """

    filename: str
    document: str
    plan: LayoutPlan
    data: ShareCardData


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for a share-card export (immutable).

    Attributes:
        payload_path: Path to the upstream JSON payload
        output_dir: Directory receiving the SVG file
        module: Module to export. None picks the payload's first module, or
            the top-ranked one if filters removed it.
        subgroups: Sub-groups to export. Empty exports all of the module's.
        exam_types: Exam types to keep. Empty keeps all.
        exam_years: Exam years to keep. Empty keeps all.
        preset: Exam-type preset, applied over the payload's available types
            instead of `exam_types`
        ranking: Ranking configuration
        layout: Layout configuration
        theme: Render theme

    Example:
        >>> config = ExportConfig(
        ...     payload_path=Path("tendance.json"),
        ...     module="Cardio",
        ...     exam_years=[2021, 2022],
        ... )
    """

    payload_path: Path
    output_dir: Path = Path(".")
    module: Optional[str] = None
    subgroups: List[str] = field(default_factory=list)
    exam_types: List[str] = field(default_factory=list)
    exam_years: List[int] = field(default_factory=list)
    preset: Optional[ExamTypePreset] = None
    ranking: RankingConfig = field(default_factory=RankingConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    theme: RenderTheme = field(default_factory=RenderTheme)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.module is not None and not self.module.strip():
            raise ValueError("module must not be blank")
        if self.preset is not None and self.exam_types:
            raise ValueError("preset and exam_types are mutually exclusive")


@dataclass(frozen=True)
class ExportResult:
    """
    Export outcome (immutable).

    Attributes:
        output_path: Written SVG file
        card: The rendered card
        warnings: Layout diagnostics
    """

    output_path: Path
    card: ShareCard
    warnings: tuple[str, ...] = ()


def build_share_card(
    topics: Sequence[AggregatedTopic],
    module: str,
    subgroups: Sequence[str],
    *,
    ranking_config: Optional[RankingConfig] = None,
    layout_config: Optional[LayoutConfig] = None,
    theme: Optional[RenderTheme] = None,
) -> ShareCard:
    """
    Build the share card for one module.

    Args:
        topics: Aggregated topics after filtering (all modules)
        module: Module to export
        subgroups: Sub-groups to include, at least one
        ranking_config: Sub-group ordering
        layout_config: Canvas geometry
        theme: Colours, icons and labels

    Returns:
        ShareCard with document, plan and data

    Raises:
        ExportError: If no module or no sub-group is selected
    """
    if not module:
        raise ExportError("No module selected for export")
    if not subgroups:
        raise ExportError(f"No sub-group selected for export of module {module!r}")

    layout_config = layout_config or LayoutConfig()

    data = build_share_card_data(topics, module, subgroups=subgroups, config=ranking_config)
    plan = plan_layout(data.blocks, layout_config)
    document = render_svg(
        plan,
        data.module_name,
        data.total_questions,
        data.year_summary.range_label,
        data.year_summary.count,
        theme=theme,
    )
    return ShareCard(
        filename=export_filename(module),
        document=document,
        plan=plan,
        data=data,
    )


def export_share_card(config: ExportConfig) -> ExportResult:
    """
    Export one module's share card from a payload file.

    Pipeline:
    1. Load and validate the payload
    2. Build the exam type/year selection
    3. Aggregate and rank modules
    4. Resolve module and sub-groups
    5. Plan, render and write the card

    Args:
        config: Export configuration

    Returns:
        ExportResult with the written path

    Raises:
        ExportError: If the payload cannot be loaded, the selection is not
            exportable or the card cannot be written
    """
    try:
        payload = load_payload(config.payload_path)
    except (OSError, ValidationError) as e:
        raise ExportError(f"Failed to load payload: {e}") from e

    logger.info(f"Loaded {len(payload.records)} occurrences from {config.payload_path}")

    exam_types: List[str] = list(config.exam_types)
    if config.preset is not None:
        exam_types = exam_type_preset(payload.available_exam_types, config.preset)
    selection = FilterSelection.from_sets(exam_types, config.exam_years)

    topics = aggregate(payload.records, selection)
    modules = project_modules(topics)
    logger.info(f"Aggregated {len(topics)} topics across {len(modules)} modules")

    module = config.module or resolve_selected_module(modules, default_module(payload.records))
    summary = next((m for m in modules if m.module == module), None)
    if summary is None:
        raise ExportError(
            f"Module {module!r} has no questions for the selected filters"
            if module else "No module has questions for the selected filters"
        )

    subgroups = list(config.subgroups) or list(summary.subgroups)
    unknown = sorted(set(subgroups) - set(summary.subgroups))
    if unknown:
        logger.warning(f"Ignoring sub-groups absent from {module!r}: {unknown}")
        subgroups = [s for s in subgroups if s in summary.subgroups]

    card = build_share_card(
        topics,
        module,
        subgroups,
        ranking_config=config.ranking,
        layout_config=config.layout,
        theme=config.theme,
    )
    try:
        output_path = write_svg(card.document, config.output_dir, module)
    except OSError as e:
        raise ExportError(f"Failed to write share card: {e}") from e

    return ExportResult(
        output_path=output_path,
        card=card,
        warnings=tuple(card.plan.warnings),
    )
