#!/usr/bin/env python3
"""
MCP Wrappers for Visual Helper

This module provides MCP-specific wrapper functions for the core placement,
capture and document functionality, handling parameter validation and error
formatting specific to MCP.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- placement_wrapper(850, 400, [{"x": 0, "y": 0, "width": 500, "height": 300}])

Expected output:
- {"success": True, "x": 0, "y": 400, "zone": "vertical-gap", "verified": True}
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from visual_helper.config import CONFIG
from visual_helper.core.capture import capture
from visual_helper.core.document import load_snapshot, scan_document
from visual_helper.core.errors import VisualHelperError
from visual_helper.core.image_processing import analyze_image
from visual_helper.core.placement import find_clear_space, placement_to_dict, to_region
from visual_helper.core.utils import format_error_response


def format_mcp_response(
    success: bool,
    data: Optional[Dict[str, Any]] = None,
    error: Optional[str] = None
) -> Dict[str, Any]:
    """
    Format a response in MCP-compatible format.

    Args:
        success: Whether the operation was successful
        data: Response data (for successful operations)
        error: Error message (for failed operations)

    Returns:
        Dict[str, Any]: MCP-compatible response
    """
    response = {"success": success}

    if success and data is not None:
        response.update(data)
    elif not success and error is not None:
        response["error"] = error

    return response


def placement_wrapper(
    width: float,
    height: float,
    occupied: Optional[List[Dict[str, Any]]] = None,
    padding: float = CONFIG["placement"]["padding"],
    rightmost_by_right_edge: bool = False
) -> Dict[str, Any]:
    """
    MCP wrapper for finding clear space on the canvas.

    Args:
        width: Width of the artifact
        height: Height of the artifact
        occupied: Regions already on the canvas, each with x, y, width and height
        padding: Clearance around the artifact
        rightmost_by_right_edge: Anchor the fallback on the largest right edge

    Returns:
        Dict[str, Any]: MCP-compatible response
    """
    if width <= 0 or height <= 0:
        return format_mcp_response(False, error=f"Dimensions must be positive, got {width}x{height}")
    if padding < 0:
        return format_mcp_response(False, error=f"Padding cannot be negative, got {padding}")

    try:
        regions = [to_region(area) for area in occupied or []]
    except (KeyError, TypeError, ValueError) as e:
        return format_mcp_response(False, error=f"Invalid occupied region: {str(e)}")

    result = find_clear_space(width, height, regions, padding=padding, rightmost_by_right_edge=rightmost_by_right_edge)
    return format_mcp_response(True, data={**placement_to_dict(result), "verified": result.verified})


def capture_wrapper(target: str = "screen", captures_dir: str = CONFIG["captures"]["dir"]) -> Dict[str, Any]:
    """
    MCP wrapper for screen capture.

    Returns:
        Dict[str, Any]: MCP-compatible response with the capture and its analysis
    """
    try:
        result = capture(target, captures_dir=captures_dir)
        return format_mcp_response(True, data={
            **result.model_dump(exclude_none=True),
            "analysis": analyze_image(result.filepath),
        })
    except (VisualHelperError, OSError, ValueError) as e:
        error_message = f"Capture failed: {str(e)}"
        logger.error(error_message)
        return format_error_response(error_message)


def scan_wrapper(snapshot_path: str) -> Dict[str, Any]:
    """MCP wrapper for scanning a document snapshot file."""
    try:
        analysis = scan_document(load_snapshot(snapshot_path))
    except VisualHelperError as e:
        logger.error(f"Scan failed: {str(e)}")
        return format_mcp_response(False, error=str(e))

    return format_mcp_response(True, data=analysis.model_dump())
