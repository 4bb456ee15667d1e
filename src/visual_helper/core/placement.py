#!/usr/bin/env python3
"""
Placement Finder

This module chooses where a new artifact goes on the canvas. Given the size of
the artifact and the regions already occupied by visible elements, it tries a
fixed sequence of strategies and returns the first placement that works:

1. empty-canvas: nothing on the canvas, use the default origin
2. vertical-gap: the first gap between vertically adjacent regions that fits
3. above: directly above the topmost region
4. right: to the right of the rightmost region (unverified last resort)

The finder never reads host state. The caller passes a snapshot of the
occupied regions and creates the artifact itself.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- find_clear_space(850, 400, [])
- find_clear_space(200, 100, [{"x": 0, "y": 0, "width": 300, "height": 100},
                             {"x": 0, "y": 400, "width": 300, "height": 100}])

Expected output:
- PlacementResult(x=100, y=100, zone="empty-canvas")
- PlacementResult(x=0, y=200, zone="vertical-gap")
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from loguru import logger
from pydantic import BaseModel, Field

from visual_helper.core.constants import PLACEMENT_SETTINGS
from visual_helper.core.geometry import OccupiedRegion, Rect, RectLike, check_collision


class Zone(str, Enum):
    """Strategy that produced a placement."""
    EMPTY_CANVAS = "empty-canvas"
    VERTICAL_GAP = "vertical-gap"
    ABOVE = "above"
    RIGHT = "right"


class PlacementResult(BaseModel):
    """Top-left corner for the new artifact and the zone it was found in."""

    model_config = {"frozen": True}

    x: float = Field(..., description="Left edge of the placement")
    y: float = Field(..., description="Top edge of the placement")
    zone: Zone = Field(..., description="Strategy that produced the placement")

    @property
    def verified(self) -> bool:
        """False for the right-of-content fallback, which skips the collision check."""
        return self.zone != Zone.RIGHT


def to_region(value: RectLike) -> OccupiedRegion:
    """Coerce a Rect or host bounds mapping into an OccupiedRegion."""
    if isinstance(value, OccupiedRegion):
        return value
    if isinstance(value, Rect):
        return OccupiedRegion(**value.to_dict())
    return OccupiedRegion(
        x=value["x"],
        y=value["y"],
        width=value["width"],
        height=value["height"],
        name=value.get("name"),
    )


def collect_occupied_regions(nodes: Iterable[Mapping[str, Any]]) -> List[OccupiedRegion]:
    """
    Collect the regions taken by visible canvas elements.

    Render bounds are preferred over layout bounds since they include effects
    such as shadows. Elements without geometry or marked invisible are skipped,
    and an element id is never counted twice.

    Args:
        nodes: Top-level nodes of the current page (snapshot dictionaries)

    Returns:
        List[OccupiedRegion]: Regions in the order the nodes were given
    """
    regions: List[OccupiedRegion] = []
    seen_ids = set()

    for node in nodes:
        if "absoluteBoundingBox" not in node or node.get("visible") is False:
            continue

        bounds = node.get("absoluteRenderBounds") or node.get("absoluteBoundingBox")
        if not bounds:
            continue

        node_id = node.get("id")
        if node_id is not None:
            if node_id in seen_ids:
                continue
            seen_ids.add(node_id)

        regions.append(OccupiedRegion(
            x=bounds["x"],
            y=bounds["y"],
            width=bounds["width"],
            height=bounds["height"],
            name=node.get("name"),
        ))

    logger.info(f"Document scan: {len(regions)} visible elements found")
    return regions


def _collides_with_any(proposed: Rect, regions: Sequence[OccupiedRegion]) -> bool:
    return any(check_collision(proposed, area) for area in regions)


def find_clear_space(
    width: float,
    height: float,
    occupied_areas: Sequence[RectLike],
    padding: float = PLACEMENT_SETTINGS["DEFAULT_PADDING"],
    rightmost_by_right_edge: bool = False,
) -> PlacementResult:
    """
    Find a spot for a new width x height artifact that avoids occupied regions.

    Args:
        width: Width of the artifact
        height: Height of the artifact
        occupied_areas: Regions already taken, each with x, y, width and height
        padding: Clearance kept between the artifact and existing content
        rightmost_by_right_edge: Pick the fallback anchor by largest right edge
            instead of largest left edge

    Returns:
        PlacementResult: Position and the zone of the strategy that succeeded.
        Zone "right" is not checked for collisions.
    """
    regions = [to_region(area) for area in occupied_areas]

    if not regions:
        origin_x, origin_y = PLACEMENT_SETTINGS["EMPTY_CANVAS_ORIGIN"]
        return PlacementResult(x=origin_x, y=origin_y, zone=Zone.EMPTY_CANVAS)

    sorted_by_y = sorted(regions, key=lambda area: area.y)

    # Vertical gaps, top to bottom
    for current, following in zip(sorted_by_y, sorted_by_y[1:]):
        gap_start = current.bottom + padding
        gap_end = following.y - padding

        if gap_end - gap_start >= height:
            proposed = Rect(x=current.x, y=gap_start, width=width, height=height)
            if not _collides_with_any(proposed, regions):
                logger.info(f"Found vertical gap at ({proposed.x}, {proposed.y})")
                return PlacementResult(x=proposed.x, y=proposed.y, zone=Zone.VERTICAL_GAP)
            logger.debug(f"Gap below '{current.name}' is tall enough but collides, skipping")

    # Above all content
    topmost = sorted_by_y[0]
    proposed = Rect(x=topmost.x, y=topmost.y - height - padding, width=width, height=height)

    if proposed.y > PLACEMENT_SETTINGS["ABOVE_CEILING"]:
        if not _collides_with_any(proposed, regions):
            logger.info(f"Placing above content at ({proposed.x}, {proposed.y})")
            return PlacementResult(x=proposed.x, y=proposed.y, zone=Zone.ABOVE)
    else:
        logger.debug(f"Position above content ({proposed.y}) is past the ceiling")

    # Right of all content
    if rightmost_by_right_edge:
        rightmost = max(regions, key=lambda area: area.right)
    else:
        rightmost = sorted(regions, key=lambda area: area.x)[-1]

    x = rightmost.right + padding
    y = rightmost.y
    logger.info(f"Placing to the right at ({x}, {y})")
    return PlacementResult(x=x, y=y, zone=Zone.RIGHT)


def placement_to_dict(result: PlacementResult) -> Dict[str, Any]:
    """Serialize a placement with the zone as its plain string value."""
    return {"x": result.x, "y": result.y, "zone": result.zone.value}


if __name__ == "__main__":
    """Validate the placement finder with sample canvases"""
    import sys

    all_validation_failures = []
    total_tests = 0

    # Test 1: Empty canvas
    total_tests += 1
    result = find_clear_space(850, 400, [])
    if (result.x, result.y, result.zone) != (100, 100, Zone.EMPTY_CANVAS):
        all_validation_failures.append(f"Empty canvas: got {result}")

    # Test 2: Vertical gap between two stacked regions
    total_tests += 1
    stacked = [
        {"x": 0, "y": 0, "width": 300, "height": 100},
        {"x": 0, "y": 400, "width": 300, "height": 100},
    ]
    result = find_clear_space(200, 100, stacked)
    if (result.y, result.zone) != (200, Zone.VERTICAL_GAP):
        all_validation_failures.append(f"Vertical gap: got {result}")

    # Test 3: Fallback to the right
    total_tests += 1
    crowded = [{"x": 0, "y": -2900, "width": 300, "height": 100}]
    result = find_clear_space(200, 100, crowded)
    if (result.x, result.y, result.zone) != (400, -2900, Zone.RIGHT):
        all_validation_failures.append(f"Right fallback: got {result}")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
