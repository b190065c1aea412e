"""
Module: output.writer

Purpose:
    Name and write exported share cards.

Key Functions:
    - export_filename(): tendance-<module>.svg
    - write_svg(): Write a document to an output directory

Dependencies:
    - pathlib (std)

Used By:
    - controller: Share-card export
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

FILENAME_PREFIX = "tendance-"
_WHITESPACE = re.compile(r"\s+")
# Path separators, reserved filename characters and control characters
_UNSAFE = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def export_filename(module_name: str) -> str:
    """
    File name for a module's share card.

    Whitespace runs become single hyphens and the name is lowercased.
    Path separators and other characters a file name cannot hold also
    become hyphens, so the result is always a single path component.

    Example:
        >>> export_filename("Appareil Cardio  Vasculaire")
        'tendance-appareil-cardio-vasculaire.svg'
        >>> export_filename("Cardio/Pneumo")
        'tendance-cardio-pneumo.svg'
    """
    slug = _UNSAFE.sub("-", _WHITESPACE.sub("-", module_name)).lower()
    return f"{FILENAME_PREFIX}{slug}.svg"


def write_svg(document: str, output_dir: Path, module_name: str) -> Path:
    """
    Write an SVG document under `output_dir`.

    Args:
        document: SVG text
        output_dir: Target directory (created if missing)
        module_name: Module the card belongs to; names the file

    Returns:
        Path to the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / export_filename(module_name)
    output_path.write_text(document, encoding="utf-8")
    logger.info(f"Wrote share card to {output_path}")
    return output_path
