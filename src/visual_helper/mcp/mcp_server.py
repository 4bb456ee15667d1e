#!/usr/bin/env python3
"""
MCP Server Entry Point for Visual Helper

This is the main entry point for the visual helper MCP server, designed to be
directly referenced in the .mcp.json configuration.

This module is part of the Integration Layer and connects the MCP functionality
to the application core.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from loguru import logger

from visual_helper import __version__
from visual_helper.config import configure_logging
from visual_helper.mcp.mcp_tools import create_mcp_server


def get_server_info() -> Dict[str, Any]:
    """
    Get server information.

    Returns:
        Dict[str, Any]: Server information
    """
    return {
        "name": "Visual Helper MCP Server",
        "version": __version__,
        "description": "Canvas placement, screen capture and document scanning for Figma work",
        "tools": ["find_clear_space", "capture_screen", "scan_document"],
    }


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the MCP server.

    Returns:
        int: Exit code
    """
    parser = argparse.ArgumentParser(description="Visual Helper MCP Server")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    start_parser = subparsers.add_parser("start", help="Start the MCP server")
    start_parser.add_argument("--host", type=str, default="localhost", help="Host to listen on")
    start_parser.add_argument("--port", type=int, default=3000, help="Port to listen on")
    start_parser.add_argument("--debug", action="store_true", help="Enable debug mode")

    subparsers.add_parser("info", help="Display server information")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "start":
        log_level = "DEBUG" if args.debug else "INFO"
        configure_logging(log_level)

        logger.info("Starting MCP server for visual helper tools")
        logger.info(f"Host: {args.host}, Port: {args.port}, Debug: {args.debug}")

        try:
            mcp = create_mcp_server(host=args.host, port=args.port)
            mcp.run()
        except KeyboardInterrupt:
            logger.info("Server stopped by user")
            return 0

    elif args.command == "info":
        print(json.dumps(get_server_info(), indent=2))

    return 0


if __name__ == "__main__":
    """
    Usage:
      python -m visual_helper.mcp.mcp_server start [--host HOST] [--port PORT] [--debug]
      python -m visual_helper.mcp.mcp_server info
    """
    sys.exit(main())
