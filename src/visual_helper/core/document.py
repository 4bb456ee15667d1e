#!/usr/bin/env python3
"""
Document Snapshot Scanner

This module reads a JSON snapshot of a design document and summarises the
current page: element counts per type, the solid fill palette, text styles,
component instances, library elements and the viewport quadrants.

A snapshot has the shape exported by the design plugin:

    {
        "document": {"children": [<page>, ...]},   # or a bare page {"children": [...]}
        "paintStyles": [...],
        "variables": [...],
        "variableCollections": {...},
        "viewport": {"x": 0, "y": 0, "width": 1440, "height": 900}
    }

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- scan_document({"children": [{"type": "FRAME", "name": "Card", "children": []}]})

Expected output:
- DocumentAnalysis(total_elements=1, element_types={"FRAME": 1}, ...)
"""

import json
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel, Field

from visual_helper.core.errors import SnapshotError
from visual_helper.core.geometry import Rect


class SpatialZone(Rect):
    """A named quadrant of the viewport."""

    name: str


class DocumentAnalysis(BaseModel):
    """Summary of the current page of a document snapshot."""

    total_elements: int = 0
    element_types: Dict[str, int] = Field(default_factory=dict)
    color_palette: Dict[str, int] = Field(default_factory=dict)
    text_styles: Dict[str, int] = Field(default_factory=dict)
    component_instances: List[Dict[str, Any]] = Field(default_factory=list)
    library_elements: List[Dict[str, Any]] = Field(default_factory=list)
    spatial_zones: List[SpatialZone] = Field(default_factory=list)


def load_snapshot(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a document snapshot from a JSON file.

    Raises:
        SnapshotError: If the file is missing or is not a JSON object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            snapshot = json.load(f)
    except FileNotFoundError as e:
        raise SnapshotError(f"Snapshot not found: {path}") from e
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Snapshot is not valid JSON: {path} ({e})") from e

    if not isinstance(snapshot, dict):
        raise SnapshotError(f"Snapshot must be a JSON object, got {type(snapshot).__name__}")

    return snapshot


def get_current_page(snapshot: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the first page of the document, or the snapshot itself when it is a page."""
    document = snapshot.get("document")
    if document is not None:
        pages = document.get("children") or []
        if not pages:
            raise SnapshotError("Snapshot document has no pages")
        return pages[0]

    if "children" not in snapshot:
        raise SnapshotError("Snapshot has neither a document nor page children")

    return snapshot


def iter_nodes(nodes: List[Mapping[str, Any]]) -> Iterator[Mapping[str, Any]]:
    """Depth-first walk over nodes and all of their descendants."""
    for node in nodes:
        yield node
        children = node.get("children")
        if children:
            yield from iter_nodes(children)


def color_key(color: Mapping[str, float], digits: int = 3) -> str:
    """Key used to de-duplicate colors that only differ past the given precision."""
    return "-".join(f"{color[c]:.{digits}f}" for c in ("r", "g", "b"))


def get_spatial_zones(viewport: Optional[Mapping[str, float]]) -> List[SpatialZone]:
    """Split the viewport into four named quadrants."""
    if not viewport:
        return []

    x, y = viewport["x"], viewport["y"]
    half_w = viewport["width"] / 2
    half_h = viewport["height"] / 2

    return [
        SpatialZone(name="top-left", x=x, y=y, width=half_w, height=half_h),
        SpatialZone(name="top-right", x=x + half_w, y=y, width=half_w, height=half_h),
        SpatialZone(name="bottom-left", x=x, y=y + half_h, width=half_w, height=half_h),
        SpatialZone(name="bottom-right", x=x + half_w, y=y + half_h, width=half_w, height=half_h),
    ]


def scan_document(snapshot: Mapping[str, Any]) -> DocumentAnalysis:
    """
    Analyze the structure of the current page.

    Args:
        snapshot: Document snapshot

    Returns:
        DocumentAnalysis: Counts and inventories for the page
    """
    page = get_current_page(snapshot)

    element_types: Counter = Counter()
    palette: Counter = Counter()
    text_styles: Counter = Counter()
    instances: List[Dict[str, Any]] = []
    library: List[Dict[str, Any]] = []
    total = 0

    for node in iter_nodes(page.get("children") or []):
        total += 1
        element_types[node.get("type", "UNKNOWN")] += 1

        for fill in node.get("fills") or []:
            if fill.get("type") == "SOLID" and "color" in fill:
                palette[color_key(fill["color"], digits=2)] += 1

        if node.get("type") == "TEXT":
            font = node.get("fontName") or {}
            style_key = f"{node.get('fontSize')}-{font.get('family')}-{font.get('style')}"
            text_styles[style_key] += 1

        if node.get("type") == "INSTANCE":
            instances.append({
                "name": node.get("name"),
                "main_component_id": (node.get("mainComponent") or {}).get("id"),
                "bounds": node.get("absoluteBoundingBox"),
            })

        if node.get("remote"):
            library.append({
                "name": node.get("name"),
                "type": node.get("type"),
                "key": node.get("key"),
            })

    analysis = DocumentAnalysis(
        total_elements=total,
        element_types=dict(element_types),
        color_palette=dict(palette),
        text_styles=dict(text_styles),
        component_instances=instances,
        library_elements=library,
        spatial_zones=get_spatial_zones(snapshot.get("viewport")),
    )

    logger.info(
        f"Scanned {total} elements: "
        + ", ".join(f"{kind}({count})" for kind, count in element_types.items())
    )
    return analysis
