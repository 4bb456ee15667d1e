#!/usr/bin/env python3
"""
Constants for Visual Helper

This module defines constants used throughout the visual helper package,
ensuring consistent placement, layout and capture settings.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- None (module contains only constants)

Expected output:
- None (module contains only constants)
"""

from typing import Dict, Any, Tuple

# Placement finder settings
PLACEMENT_SETTINGS: Dict[str, Any] = {
    "DEFAULT_PADDING": 100,  # Clearance around a new placement
    "EMPTY_CANVAS_ORIGIN": (100, 100),  # Origin used when nothing is on the canvas
    "ABOVE_CEILING": -3000,  # Placements above content must stay below this y
}

# Color showcase layout (plane units)
SHOWCASE_LAYOUT: Dict[str, Any] = {
    "ESTIMATED_SIZE": (850, 400),  # Size reserved before the grid is built
    "FRAME_PADDING": 40,
    "ITEM_SPACING": 32,
    "CONTENT_WIDTH": 720,
    "HEADER_HEIGHT": 60,
    "DIVIDER_HEIGHT": 1,
    "CARD_WIDTH": 170,
    "CARD_HEIGHT": 140,
    "SWATCH_HEIGHT": 90,
    "CARD_SPACING": 12,
    "CARD_PADDING": 12,
    "LABEL_LIMIT": 22,
    "TITLE": "DS19 Color Library",
}

# Capture targets understood by the capture layer
CAPTURE_TARGETS: Tuple[str, ...] = ("screen", "interactive", "figma")

# Image analysis settings
IMAGE_SETTINGS: Dict[str, Any] = {
    "ANALYSIS_MAX_SIZE": 256,  # Images are downscaled before color analysis
    "DOMINANT_COLORS": 5,
}

# Number of history entries returned by the server
HISTORY_PAGE_SIZE: int = 10


if __name__ == "__main__":
    """Validate module constants"""
    import sys

    all_validation_failures = []
    total_tests = 0

    # Test 1: Verify placement settings
    total_tests += 1
    if PLACEMENT_SETTINGS["DEFAULT_PADDING"] <= 0:
        all_validation_failures.append("DEFAULT_PADDING should be positive")

    # Test 2: Verify four cards fit in one showcase row
    total_tests += 1
    row_width = 4 * SHOWCASE_LAYOUT["CARD_WIDTH"] + 3 * SHOWCASE_LAYOUT["CARD_SPACING"]
    if row_width > SHOWCASE_LAYOUT["CONTENT_WIDTH"]:
        all_validation_failures.append(f"Four cards ({row_width}) exceed content width")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
