"""
Module: output

Purpose:
    SVG share-card rendering and file export.

Key Functions:
    - render_svg(): LayoutPlan → SVG text
    - export_filename(): Conventional file name for a module
    - write_svg(): Write a card to disk

Key Classes:
    - RenderTheme: Colours, icons and labels
"""

from .theme import RenderTheme, BRAND_COLOR, DEFAULT_ICON
from .renderer import render_svg, escape_xml, truncate_label
from .writer import export_filename, write_svg

__all__ = [
    "RenderTheme",
    "BRAND_COLOR",
    "DEFAULT_ICON",
    "render_svg",
    "escape_xml",
    "truncate_label",
    "export_filename",
    "write_svg",
]
