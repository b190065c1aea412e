"""
Theme for the share-card renderer.

Colours, icons and fixed labels used in the SVG output. Sub-groups absent
from the accent/icon maps fall back to the brand colour and a book icon.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


BRAND_COLOR = "#09b2ac"
DEFAULT_ICON = "📖"

SUBGROUP_ACCENTS: Mapping[str, str] = MappingProxyType({
    "Anatomie": "#f43f5e",
    "Histologie": "#a855f7",
    "Physiologie": "#3b82f6",
    "Biochimie": "#10b981",
    "Biophysique": "#f59e0b",
})

SUBGROUP_ICONS: Mapping[str, str] = MappingProxyType({
    "Anatomie": "🫀",
    "Histologie": "🔬",
    "Physiologie": "⚡",
    "Biochimie": "🧪",
    "Biophysique": "📐",
})


@dataclass(frozen=True)
class RenderTheme:
    """
    Visual settings for the share card (immutable).

    Attributes:
        brand_color: Badge, divider and fallback accent colour
        brand_label: Text of the brand badge
        subtitle: Label beside the header badge
        font_family: CSS font-family list for every text element
        accents: Accent colour per sub-group
        icons: Icon glyph per sub-group
        max_label_chars: Character budget for topic labels
    """

    brand_color: str = BRAND_COLOR
    brand_label: str = "FMC App"
    subtitle: str = "Tendance des Cours"
    font_family: str = "'Manrope','Inter','Segoe UI',sans-serif"
    accents: Mapping[str, str] = field(default_factory=lambda: SUBGROUP_ACCENTS)
    icons: Mapping[str, str] = field(default_factory=lambda: SUBGROUP_ICONS)
    max_label_chars: int = 50

    def __post_init__(self) -> None:
        if self.max_label_chars < 2:
            raise ValueError(f"max_label_chars must be at least 2: {self.max_label_chars}")

    def accent_for(self, subgroup: str) -> str:
        return self.accents.get(subgroup, self.brand_color)

    def icon_for(self, subgroup: str) -> str:
        return self.icons.get(subgroup, DEFAULT_ICON)
