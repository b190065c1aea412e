"""
Module: output.renderer

Purpose:
    Render a LayoutPlan to a self-contained SVG share card.
    Only primitive rect/line/text/gradient elements are emitted (no
    foreignObject), so the file opens in any SVG editor without assets.

Key Functions:
    - render_svg(): Main rendering function
    - escape_xml(): Make untrusted text safe for element content and attributes
    - truncate_label(): Character-budget label truncation

Document structure:
    defs (background, glows, divider, one bar gradient per block)
    → background → header → divider → blocks → footer

Dependencies:
    - layout.models: LayoutPlan, BlockPlan, RowPlacement
    - layout.config: LayoutConfig
    - output.theme: RenderTheme

Used By:
    - controller: Share-card export
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional
from xml.sax import saxutils

from tendance_toolkit.layout.config import LayoutConfig
from tendance_toolkit.layout.models import BlockPlan, LayoutPlan, RowPlacement

from .theme import RenderTheme

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'

ELLIPSIS = "…"

_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")
_ATTRIBUTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# Header rows inside LayoutConfig.header_height
BRAND_ROW_HEIGHT = 44

# Row geometry inside LayoutConfig.row_height
BAR_HEIGHT = 28
BAR_OFFSET = 2
TEXT_BASELINE = 21
RANK_BASELINE = 20


def escape_xml(text: str) -> str:
    """
    Escape text for safe embedding in element content or attributes.

    Characters XML 1.0 cannot carry at all (C0 controls other than tab,
    newline and carriage return, U+FFFE, U+FFFF) are dropped first.

    Example:
        >>> escape_xml('Tom & "Jerry" <3')
        'Tom &amp; &quot;Jerry&quot; &lt;3'
    """
    cleaned = _INVALID_XML_CHARS.sub("", text)
    return saxutils.escape(cleaned, _ATTRIBUTE_ENTITIES)


def truncate_label(text: str, max_chars: int = 50) -> str:
    """
    Truncate a label to `max_chars` characters, ellipsis included.

    This is a character-count approximation of the width available at the
    row font size, not a measurement: wide glyphs can still overrun and
    narrow ones leave space unused.

    Example:
        >>> truncate_label("Physiologie cardiaque", 12)
        'Physiologie…'
    """
    if len(text) <= max_chars:
        return text
    return text[:max_chars - 1] + ELLIPSIS


def _text(x: int, y: int, content: str, *, theme: RenderTheme, size: int,
          weight: int, fill: str, anchor: Optional[str] = None, extra: str = "") -> str:
    """One <text> element with the theme font. `content` must be escaped."""
    anchor_attr = f' text-anchor="{anchor}"' if anchor else ""
    return (
        f'<text x="{x}" y="{y}" font-family="{theme.font_family}" font-size="{size}" '
        f'font-weight="{weight}" fill="{fill}"{anchor_attr}{extra}>{content}</text>'
    )


def _defs(plan: LayoutPlan, theme: RenderTheme) -> List[str]:
    brand = theme.brand_color
    parts = [
        "<defs>",
        '<linearGradient id="bg-grad" x1="0%" y1="0%" x2="100%" y2="100%">',
        '<stop offset="0%" stop-color="#1a1a2e"/>',
        '<stop offset="50%" stop-color="#16213e"/>',
        '<stop offset="100%" stop-color="#0f3460"/>',
        "</linearGradient>",
        '<radialGradient id="glow-tr" cx="85%" cy="15%" r="40%">',
        f'<stop offset="0%" stop-color="{brand}" stop-opacity="0.15"/>',
        f'<stop offset="100%" stop-color="{brand}" stop-opacity="0"/>',
        "</radialGradient>",
        '<radialGradient id="glow-bl" cx="15%" cy="85%" r="30%">',
        '<stop offset="0%" stop-color="#9941ff" stop-opacity="0.1"/>',
        '<stop offset="100%" stop-color="#9941ff" stop-opacity="0"/>',
        "</radialGradient>",
        '<linearGradient id="divider-grad" x1="0%" y1="0%" x2="100%" y2="0%">',
        f'<stop offset="0%" stop-color="{brand}"/>',
        '<stop offset="60%" stop-color="#9941ff" stop-opacity="0.5"/>',
        '<stop offset="100%" stop-color="#9941ff" stop-opacity="0"/>',
        "</linearGradient>",
    ]
    for block in plan.blocks:
        accent = theme.accent_for(block.subgroup)
        parts.extend([
            f'<linearGradient id="bar-grad-{block.index}" x1="0%" y1="0%" x2="100%" y2="0%">',
            f'<stop offset="0%" stop-color="{accent}" stop-opacity="0.4"/>',
            f'<stop offset="100%" stop-color="{accent}" stop-opacity="0.13"/>',
            "</linearGradient>",
        ])
    parts.append("</defs>")
    return parts


def _background(plan: LayoutPlan) -> List[str]:
    w, h = plan.canvas_width, plan.canvas_height
    return [
        f'<rect width="{w}" height="{h}" fill="url(#bg-grad)"/>',
        f'<rect width="{w}" height="{h}" fill="url(#glow-tr)"/>',
        f'<rect width="{w}" height="{h}" fill="url(#glow-bl)"/>',
    ]


def _header(
    plan: LayoutPlan,
    config: LayoutConfig,
    theme: RenderTheme,
    module_name: str,
    total_questions: int,
    exam_years_range: str,
    total_exam_years: int,
) -> List[str]:
    pad = config.padding
    y = pad
    muted = "rgba(255,255,255,0.5)"
    parts = [
        f'<rect x="{pad}" y="{y}" width="100" height="32" rx="8" fill="{theme.brand_color}"/>',
        _text(pad + 50, y + 21, escape_xml(theme.brand_label), theme=theme, size=18,
              weight=800, fill="#262626", anchor="middle"),
        _text(pad + 116, y + 21, escape_xml(theme.subtitle), theme=theme, size=14,
              weight=500, fill=muted),
    ]
    y += BRAND_ROW_HEIGHT

    stats_x = plan.canvas_width - pad
    parts.extend([
        _text(pad, y + 30, escape_xml(module_name), theme=theme, size=36,
              weight=800, fill="#ffffff"),
        f'<rect x="{stats_x - 160}" y="{y - 12}" width="160" height="36" rx="10" '
        f'fill="rgba(9,178,172,0.15)" stroke="rgba(9,178,172,0.3)" stroke-width="1"/>',
        _text(stats_x - 80, y + 12, f"{total_questions} Questions", theme=theme, size=14,
              weight=600, fill=theme.brand_color, anchor="middle"),
        _text(stats_x, y + 40, f"{total_exam_years} promos · {escape_xml(exam_years_range)}",
              theme=theme, size=13, weight=500, fill=muted, anchor="end"),
    ])
    return parts


def _divider(config: LayoutConfig) -> List[str]:
    y = config.padding + config.header_height
    return [
        f'<rect x="{config.padding}" y="{y}" width="{config.content_width}" '
        f'height="2" rx="1" fill="url(#divider-grad)"/>'
    ]


def _row(row: RowPlacement, block: BlockPlan, plan: LayoutPlan,
         config: LayoutConfig, theme: RenderTheme, accent: str) -> List[str]:
    pad = config.padding
    row_x = pad + 32
    label = escape_xml(truncate_label(row.entry.topic, theme.max_label_chars))
    return [
        _text(pad + 24, row.top + RANK_BASELINE, f"{row.rank}.", theme=theme, size=13,
              weight=700, fill="rgba(255,255,255,0.4)", anchor="end"),
        f'<rect x="{row_x}" y="{row.top + BAR_OFFSET}" width="{config.bar_area_width}" '
        f'height="{BAR_HEIGHT}" rx="6" fill="rgba(255,255,255,0.05)"/>',
        f'<rect x="{row_x}" y="{row.top + BAR_OFFSET}" width="{row.bar_width}" '
        f'height="{BAR_HEIGHT}" rx="6" fill="url(#bar-grad-{block.index})"/>',
        _text(row_x + 12, row.top + TEXT_BASELINE, label, theme=theme, size=13,
              weight=600, fill="#ffffff"),
        _text(plan.canvas_width - pad, row.top + TEXT_BASELINE,
              f"{row.entry.question_count}Q", theme=theme, size=14, weight=700,
              fill=accent, anchor="end"),
    ]


def _block(block: BlockPlan, plan: LayoutPlan, config: LayoutConfig,
           theme: RenderTheme) -> List[str]:
    pad = config.padding
    accent = theme.accent_for(block.subgroup)
    # Rough 10px per character for the 16px bold label
    top_label_x = pad + 34 + len(block.subgroup) * 10 + 12
    parts = [
        f'<text x="{pad}" y="{block.top + 20}" font-size="22">'
        f"{escape_xml(theme.icon_for(block.subgroup))}</text>",
        _text(pad + 34, block.top + 20, escape_xml(block.subgroup), theme=theme, size=16,
              weight=700, fill=accent, extra=' letter-spacing="0.5"'),
        _text(top_label_x, block.top + 20, f"— Top {block.row_count}", theme=theme,
              size=12, weight=500, fill="rgba(255,255,255,0.35)"),
    ]
    for row in block.rows:
        parts.extend(_row(row, block, plan, config, theme, accent))
    return parts


def _footer(plan: LayoutPlan, config: LayoutConfig, theme: RenderTheme,
            exam_years_range: str, total_exam_years: int) -> List[str]:
    pad = config.padding
    w = plan.canvas_width
    footer_y = plan.canvas_height - pad
    faint = "rgba(255,255,255,0.35)"
    return [
        f'<line x1="{pad}" y1="{footer_y - 24}" x2="{w - pad}" y2="{footer_y - 24}" '
        f'stroke="rgba(255,255,255,0.1)" stroke-width="1"/>',
        _text(pad, footer_y,
              f"Classement basé sur {total_exam_years} promos ({escape_xml(exam_years_range)})",
              theme=theme, size=12, weight=500, fill=faint),
        _text(w - pad - 90, footer_y, "Généré par", theme=theme, size=12, weight=500,
              fill=faint),
        f'<rect x="{w - pad - 80}" y="{footer_y - 14}" width="80" height="22" rx="6" '
        f'fill="{theme.brand_color}"/>',
        _text(w - pad - 40, footer_y, escape_xml(theme.brand_label), theme=theme, size=12,
              weight=800, fill="#262626", anchor="middle"),
    ]


def render_svg(
    plan: LayoutPlan,
    module_name: str,
    total_questions: int,
    exam_years_range: str,
    total_exam_years: int,
    *,
    theme: Optional[RenderTheme] = None,
) -> str:
    """
    Render a layout plan to an SVG document.

    Identical inputs always give byte-identical output. An empty plan
    renders a valid card with header and footer only.

    Args:
        plan: Planned blocks and rows, with the geometry they were planned on
        module_name: Module shown in the header
        total_questions: Question total shown in the stats badge
        exam_years_range: Year range label, e.g. "2019–2024"
        total_exam_years: Number of distinct exam years
        theme: Colours, icons and labels

    Returns:
        SVG document text (UTF-8 declared)
    """
    config = plan.config
    theme = theme or RenderTheme()

    parts: List[str] = []
    parts.extend(_defs(plan, theme))
    parts.extend(_background(plan))
    parts.extend(_header(plan, config, theme, module_name, total_questions,
                         exam_years_range, total_exam_years))
    parts.extend(_divider(config))
    for block in plan.blocks:
        parts.extend(_block(block, plan, config, theme))
    parts.extend(_footer(plan, config, theme, exam_years_range, total_exam_years))

    w, h = plan.canvas_width, plan.canvas_height
    body = "\n".join(f"  {part}" for part in parts)
    document = (
        f"{XML_DECLARATION}\n"
        f'<svg xmlns="{SVG_NAMESPACE}" viewBox="0 0 {w} {h}" width="{w}" height="{h}">\n'
        f"{body}\n"
        "</svg>\n"
    )

    logger.debug(f"Rendered {len(plan.blocks)} blocks ({plan.total_rows} rows) to SVG")
    return document
