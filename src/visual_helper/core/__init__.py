"""
Core Layer for Visual Helper

This package contains the core business logic: canvas geometry and the
placement finder, document snapshot scanning, color showcase and hero image
rendering, and screen capture.

The core layer is designed to be:
1. Independent of UI or integration concerns
2. Fully testable in isolation
3. Focused on business logic only

Usage:
    from visual_helper.core import find_clear_space, capture
    position = find_clear_space(850, 400, occupied_regions)
    result = capture("figma", captures_dir="captures")
"""

# Core constants and settings
from visual_helper.core.constants import (
    PLACEMENT_SETTINGS,
    SHOWCASE_LAYOUT,
    CAPTURE_TARGETS,
    IMAGE_SETTINGS,
)

# Errors
from visual_helper.core.errors import VisualHelperError, CaptureError, SnapshotError

# Geometry and placement
from visual_helper.core.geometry import Rect, OccupiedRegion, as_rect, check_collision, get_intersection
from visual_helper.core.placement import (
    Zone,
    PlacementResult,
    find_clear_space,
    collect_occupied_regions,
    placement_to_dict,
)

# Document snapshots and colors
from visual_helper.core.document import DocumentAnalysis, load_snapshot, get_current_page, scan_document
from visual_helper.core.colors import ColorSwatch, ColorSource, rgb_to_hex, extract_showcase_colors
from visual_helper.core.showcase import ShowcaseLayout, build_showcase, render_showcase
from visual_helper.core.hero import render_hero_image

# Capture and image processing
from visual_helper.core.capture import CaptureResult, capture, capture_screen, capture_figma_window, open_folder
from visual_helper.core.image_processing import analyze_image, compare_images

__all__ = [
    # Constants
    'PLACEMENT_SETTINGS',
    'SHOWCASE_LAYOUT',
    'CAPTURE_TARGETS',
    'IMAGE_SETTINGS',

    # Errors
    'VisualHelperError',
    'CaptureError',
    'SnapshotError',

    # Geometry and placement
    'Rect',
    'OccupiedRegion',
    'as_rect',
    'check_collision',
    'get_intersection',
    'Zone',
    'PlacementResult',
    'find_clear_space',
    'collect_occupied_regions',
    'placement_to_dict',

    # Documents and colors
    'DocumentAnalysis',
    'load_snapshot',
    'get_current_page',
    'scan_document',
    'ColorSwatch',
    'ColorSource',
    'rgb_to_hex',
    'extract_showcase_colors',
    'ShowcaseLayout',
    'build_showcase',
    'render_showcase',
    'render_hero_image',

    # Capture
    'CaptureResult',
    'capture',
    'capture_screen',
    'capture_figma_window',
    'open_folder',
    'analyze_image',
    'compare_images',
]
