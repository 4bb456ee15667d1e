#!/usr/bin/env python3
"""
Geometry Primitives for Visual Helper

This module provides the axis-aligned rectangle model and the two overlap
queries shared by the placement finder and its callers.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- check_collision(Rect(x=0, y=0, width=100, height=100), Rect(x=50, y=50, width=100, height=100))
- get_intersection({"x": 0, "y": 0, "width": 100, "height": 100}, {"x": 100, "y": 0, "width": 10, "height": 10})

Expected output:
- True
- None (the rectangles only share an edge)
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field


class Rect(BaseModel):
    """An axis-aligned rectangle on the canvas plane."""

    model_config = {"frozen": True}

    x: float = Field(..., description="Left edge")
    y: float = Field(..., description="Top edge")
    width: float = Field(..., description="Horizontal extent")
    height: float = Field(..., description="Vertical extent")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


class OccupiedRegion(Rect):
    """A rectangle already taken by a visible canvas element."""

    name: Optional[str] = Field(None, description="Name of the element occupying the region")


RectLike = Union[Rect, Mapping[str, Any]]


def as_rect(value: Optional[RectLike]) -> Optional[Rect]:
    """
    Coerce host bounds into a Rect.

    Mappings only need ``x``, ``y``, ``width`` and ``height``; any other keys
    (``right``, ``bottom``, ``node``...) are ignored.

    Args:
        value: Rect, mapping with rectangle keys, or None

    Returns:
        Optional[Rect]: The rectangle, or None when value is None
    """
    if value is None or isinstance(value, Rect):
        return value

    return Rect(
        x=value["x"],
        y=value["y"],
        width=value["width"],
        height=value["height"],
    )


def check_collision(bounds_a: Optional[RectLike], bounds_b: Optional[RectLike]) -> bool:
    """
    Check whether two rectangles overlap with positive area.

    Rectangles that only share an edge do not collide. An absent rectangle
    never collides with anything.

    Args:
        bounds_a: First rectangle
        bounds_b: Second rectangle

    Returns:
        bool: True if the rectangles overlap
    """
    a = as_rect(bounds_a)
    b = as_rect(bounds_b)
    if a is None or b is None:
        return False

    return not (
        a.right <= b.x
        or b.right <= a.x
        or a.bottom <= b.y
        or b.bottom <= a.y
    )


def get_intersection(bounds_a: Optional[RectLike], bounds_b: Optional[RectLike]) -> Optional[Rect]:
    """
    Get the overlapping rectangle of two rectangles.

    Args:
        bounds_a: First rectangle
        bounds_b: Second rectangle

    Returns:
        Optional[Rect]: The overlap, or None if either input is absent or the
        overlap is not strictly positive on both axes
    """
    a = as_rect(bounds_a)
    b = as_rect(bounds_b)
    if a is None or b is None:
        return None

    x = max(a.x, b.x)
    y = max(a.y, b.y)
    right = min(a.right, b.right)
    bottom = min(a.bottom, b.bottom)

    if x < right and y < bottom:
        return Rect(x=x, y=y, width=right - x, height=bottom - y)

    return None


if __name__ == "__main__":
    """Validate geometry functions"""
    import sys

    all_validation_failures = []
    total_tests = 0

    # Test 1: Overlapping rectangles collide
    total_tests += 1
    if not check_collision(Rect(x=0, y=0, width=100, height=100), Rect(x=50, y=50, width=100, height=100)):
        all_validation_failures.append("Overlapping rectangles should collide")

    # Test 2: Edge-touching rectangles do not collide
    total_tests += 1
    if check_collision({"x": 0, "y": 0, "width": 100, "height": 100}, {"x": 100, "y": 0, "width": 10, "height": 10}):
        all_validation_failures.append("Edge-touching rectangles should not collide")

    # Test 3: Intersection area
    total_tests += 1
    overlap = get_intersection(Rect(x=0, y=0, width=100, height=100), Rect(x=50, y=50, width=100, height=100))
    if overlap is None or overlap.area != 2500:
        all_validation_failures.append(f"Expected overlap area 2500, got {overlap}")

    # Test 4: Absent input
    total_tests += 1
    if check_collision(None, Rect(x=0, y=0, width=1, height=1)) or get_intersection(None, None) is not None:
        all_validation_failures.append("Absent rectangles should never collide or intersect")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
