"""
Visual Helper

Screen captures, canvas placement and color showcases for Figma work. The
package is split into layers:

- core: placement geometry, snapshot scanning, colors, rendering and capture
- cli: the ``visual-helper`` command
- server: the local HTTP service used by the design plugin
- mcp: MCP tools for agents

Usage:
    from visual_helper.core import find_clear_space
    position = find_clear_space(850, 400, occupied_regions)
"""

__version__ = "1.0.0"
