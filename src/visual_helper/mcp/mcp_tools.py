#!/usr/bin/env python3
"""
MCP Tools for Visual Helper

This module provides MCP tool definitions for canvas placement, screen capture
and document scanning so agents can drive the same operations as the CLI.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- MCP server configuration

Expected output:
- Configured MCP server with registered tools
"""

from typing import Any, Dict, List, Optional

from loguru import logger
from mcp.server.fastmcp import FastMCP

from visual_helper.config import CONFIG
from visual_helper.mcp.wrappers import capture_wrapper, placement_wrapper, scan_wrapper


def create_mcp_server(
    name: str = "Visual Helper",
    host: str = "localhost",
    port: int = 3000
) -> FastMCP:
    """
    Create and configure MCP server with visual helper tools

    Args:
        name: Name for the MCP server
        host: Host to listen on
        port: Port to listen on

    Returns:
        FastMCP: Configured MCP server instance
    """
    mcp = FastMCP(name, host=host, port=port)
    logger.info(f"Initialized FastMCP server: {name} on {host}:{port}")

    register_placement_tool(mcp)
    register_capture_tool(mcp)
    register_scan_tool(mcp)

    return mcp


def register_placement_tool(mcp: FastMCP) -> None:
    """
    Register find_clear_space tool with the MCP server

    Args:
        mcp: MCP server instance
    """
    @mcp.tool()
    def find_clear_space(
        width: float,
        height: float,
        occupied: Optional[List[Dict[str, Any]]] = None,
        padding: float = CONFIG["placement"]["padding"],
        rightmost_by_right_edge: bool = False
    ) -> Dict[str, Any]:
        """
        Finds a position for a new width x height artifact that does not overlap existing canvas content.

        Strategies are tried in order: empty canvas, vertical gap between elements, above the topmost
        element, then to the right of the rightmost element.

        Args:
            width (float): Width of the artifact.
            height (float): Height of the artifact.
            occupied (list, optional): Existing regions as {x, y, width, height} objects. Defaults to none.
            padding (float, optional): Clearance around the artifact. Defaults to 100.
            rightmost_by_right_edge (bool, optional): Anchor the right-hand fallback on the largest right
                edge instead of the largest left edge. Defaults to False.

        Returns:
            dict: MCP-compliant response containing:
                - x, y: Top-left corner of the artifact.
                - zone: empty-canvas, vertical-gap, above or right.
                - verified: False for the unchecked right-hand fallback.
                - success: Boolean indicating success/failure.
                On error:
                - error: Error message as a string.
        """
        logger.info(f"Placement requested for {width}x{height} among {len(occupied or [])} regions")
        return placement_wrapper(width, height, occupied, padding, rightmost_by_right_edge)


def register_capture_tool(mcp: FastMCP) -> None:
    """
    Register capture_screen tool with the MCP server

    Args:
        mcp: MCP server instance
    """
    @mcp.tool()
    def capture_screen(target: str = "screen") -> Dict[str, Any]:
        """
        Captures the screen or the Figma window and saves it to the captures directory.

        Args:
            target (str, optional): "screen", "interactive" or "figma". Defaults to "screen".

        Returns:
            dict: MCP-compliant response containing:
                - filename, filepath, timestamp: The saved capture.
                - analysis: Image size, dimensions and dominant colors.
                - success: Boolean indicating success/failure.
                On error:
                - error: Error message as a string.
        """
        logger.info(f"Capture requested for target={target}")
        return capture_wrapper(target, CONFIG["captures"]["dir"])


def register_scan_tool(mcp: FastMCP) -> None:
    """
    Register scan_document tool with the MCP server

    Args:
        mcp: MCP server instance
    """
    @mcp.tool()
    def scan_document(snapshot_path: str) -> Dict[str, Any]:
        """
        Summarizes the current page of a document snapshot JSON file.

        Args:
            snapshot_path (str): Path to the snapshot file.

        Returns:
            dict: MCP-compliant response containing element counts by type, fill colors, text styles,
                component instances, library elements and viewport zones.
        """
        logger.info(f"Document scan requested for {snapshot_path}")
        return scan_wrapper(snapshot_path)
