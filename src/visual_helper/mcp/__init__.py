"""
MCP Layer for Visual Helper

This package contains the MCP (Model Context Protocol) layer, exposing canvas
placement, screen capture and document scanning as tools for AI agents.

Usage:
    # Start the MCP server
    visual-helper-mcp start

    # Use the MCP server in Python
    from visual_helper.mcp import create_mcp_server
    mcp = create_mcp_server()
    mcp.run()
"""

from visual_helper.mcp.mcp_tools import create_mcp_server
from visual_helper.mcp.mcp_server import main, get_server_info
from visual_helper.mcp.wrappers import (
    placement_wrapper,
    capture_wrapper,
    scan_wrapper,
    format_mcp_response
)

__all__ = [
    # MCP server
    'create_mcp_server',
    'main',
    'get_server_info',

    # MCP wrappers
    'placement_wrapper',
    'capture_wrapper',
    'scan_wrapper',
    'format_mcp_response'
]

# Example configuration for .mcp.json
EXAMPLE_MCP_CONFIG = """
{
  "mcpServers": {
    "visual-helper": {
      "command": "visual-helper-mcp",
      "args": ["start"]
    }
  }
}
"""
