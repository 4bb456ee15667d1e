#!/usr/bin/env python3
"""
Showcase Color Extraction

This module pulls the colors worth showcasing out of a document snapshot.
Paint styles come first, then color variables, and only when both are empty
does it fall back to the solid fills used on the page.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- rgb_to_hex({"r": 1, "g": 0.5, "b": 0})
- extract_showcase_colors({"children": [], "paintStyles": [
      {"name": "Brand/Primary", "key": "abc", "paints": [{"type": "SOLID", "color": {"r": 0, "g": 0.4, "b": 1}}]}
  ]})

Expected output:
- "#FF8000"
- [ColorSwatch(name="Brand/Primary", hex="#0066FF", source="style", is_library=True)]
"""

import math
from enum import Enum
from typing import Any, Dict, List, Mapping, Set

from loguru import logger
from pydantic import BaseModel, Field

from visual_helper.core.constants import SHOWCASE_LAYOUT
from visual_helper.core.document import color_key, get_current_page, iter_nodes


class ColorSource(str, Enum):
    """Where a showcase color was found."""
    STYLE = "style"
    VARIABLE = "variable"
    DOCUMENT = "document"


class ColorSwatch(BaseModel):
    """A named color for the showcase grid."""

    name: str = Field(..., description="Style, variable or node name")
    r: float = Field(..., ge=0, le=1)
    g: float = Field(..., ge=0, le=1)
    b: float = Field(..., ge=0, le=1)
    source: ColorSource = ColorSource.STYLE
    is_library: bool = False

    @property
    def hex(self) -> str:
        return rgb_to_hex({"r": self.r, "g": self.g, "b": self.b})

    @property
    def rgb255(self) -> tuple:
        return tuple(_channel_to_byte(v) for v in (self.r, self.g, self.b))

    @property
    def display_name(self) -> str:
        return f"📚 {self.name}" if self.is_library else self.name


def _channel_to_byte(value: float) -> int:
    # Half-up rounding, so 0.5 * 255 lands on 128
    return int(math.floor(value * 255 + 0.5))


def rgb_to_hex(color: Mapping[str, float]) -> str:
    """
    Convert a 0-1 RGB color to an uppercase hex string.

    Args:
        color: Mapping with r, g and b channels in [0, 1]

    Returns:
        str: Color as "#RRGGBB"
    """
    return "#" + "".join(f"{_channel_to_byte(color[c]):02X}" for c in ("r", "g", "b"))


def truncate_label(name: str, limit: int = SHOWCASE_LAYOUT["LABEL_LIMIT"]) -> str:
    """Shorten a card label to fit the card width."""
    return name[:limit] + "..." if len(name) > limit else name


def _is_color_value(value: Any) -> bool:
    return isinstance(value, Mapping) and all(c in value for c in ("r", "g", "b"))


def _swatch(name: str, color: Mapping[str, float], source: ColorSource, is_library: bool = False) -> ColorSwatch:
    return ColorSwatch(
        name=name,
        r=color["r"],
        g=color["g"],
        b=color["b"],
        source=source,
        is_library=is_library,
    )


def style_colors(paint_styles: List[Mapping[str, Any]], seen: Set[str]) -> List[ColorSwatch]:
    """Collect the first solid paint of each paint style."""
    swatches = []

    for style in paint_styles:
        try:
            name = style["name"]
            is_library = bool(style.get("key"))
            logger.debug(f"Style: {name}, Library: {is_library}, Key: {style.get('key') or 'local'}")

            paints = style.get("paints") or []
            if not paints or paints[0].get("type") != "SOLID":
                continue

            color = paints[0]["color"]
            key = color_key(color)
            if key in seen:
                continue

            seen.add(key)
            swatches.append(_swatch(name, color, ColorSource.STYLE, is_library))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Error processing style {style.get('name', '?')}: {e}")

    return swatches


def variable_colors(
    variables: List[Mapping[str, Any]],
    collections: Mapping[str, Mapping[str, Any]],
    seen: Set[str],
) -> List[ColorSwatch]:
    """Collect each color variable's value in its collection's default mode."""
    swatches = []

    for variable in variables:
        try:
            if variable.get("resolvedType", "COLOR") != "COLOR":
                continue

            collection = collections.get(variable.get("variableCollectionId"))
            if not collection:
                continue

            value = (variable.get("valuesByMode") or {}).get(collection["defaultModeId"])
            if not _is_color_value(value):
                continue

            key = color_key(value)
            if key in seen:
                continue

            seen.add(key)
            swatches.append(_swatch(variable["name"], value, ColorSource.VARIABLE))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Error processing variable {variable.get('name', '?')}: {e}")

    return swatches


def document_colors(snapshot: Mapping[str, Any]) -> List[ColorSwatch]:
    """Collect unique solid fills used anywhere on the current page."""
    page = get_current_page(snapshot)
    unique: Dict[str, ColorSwatch] = {}

    for node in iter_nodes(page.get("children") or []):
        for fill in node.get("fills") or []:
            if fill.get("type") != "SOLID" or fill.get("visible") is False or "color" not in fill:
                continue
            key = color_key(fill["color"])
            if key not in unique:
                name = node.get("name") or "Document Color"
                unique[key] = _swatch(name, fill["color"], ColorSource.DOCUMENT)

    return list(unique.values())


def extract_showcase_colors(snapshot: Mapping[str, Any]) -> List[ColorSwatch]:
    """
    Extract the colors to display in the showcase.

    Args:
        snapshot: Document snapshot

    Returns:
        List[ColorSwatch]: Unique colors, styles before variables; page fills
        only when neither produced a color
    """
    paint_styles = snapshot.get("paintStyles") or []
    variables = snapshot.get("variables") or []
    collections = snapshot.get("variableCollections") or {}
    logger.info(f"Found {len(paint_styles)} paint styles and {len(variables)} color variables")

    seen: Set[str] = set()
    swatches = style_colors(paint_styles, seen)
    swatches += variable_colors(variables, collections, seen)

    if not swatches:
        logger.info("No library colors loaded, falling back to document colors")
        swatches = document_colors(snapshot)

    return swatches
