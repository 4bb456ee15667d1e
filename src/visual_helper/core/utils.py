#!/usr/bin/env python3
"""
Utility Functions for Visual Helper

This module provides common utility functions used by other core modules.
It includes functions for filenames, directories, safe names and error
responses.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- generate_filename("figma", "png")
- sanitize_name("Hero / Desktop")

Expected output:
- "figma_1718000000000.png"
- "Hero___Desktop"
"""

import os
import platform
import re
import time
from typing import Any, Dict

from loguru import logger


def timestamp_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def generate_filename(prefix: str = "screen", extension: str = "png", timestamp: int = None) -> str:
    """
    Generates a unique filename with timestamp.

    Args:
        prefix: Filename prefix
        extension: File extension without dot
        timestamp: Millisecond timestamp, current time when omitted

    Returns:
        str: Generated filename
    """
    if timestamp is None:
        timestamp = timestamp_ms()
    return f"{prefix}_{timestamp}.{extension}"


def ensure_directory(directory: str) -> bool:
    """
    Ensures directory exists, creating it if necessary.

    Args:
        directory: Directory path

    Returns:
        bool: True if successful, False otherwise
    """
    try:
        os.makedirs(directory, exist_ok=True)
        return True
    except OSError as e:
        logger.error(f"Failed to create directory {directory}: {str(e)}")
        return False


def sanitize_name(name: str) -> str:
    """Replace every character that is not an ASCII letter or digit with an underscore."""
    return re.sub(r"[^a-z0-9]", "_", name, flags=re.IGNORECASE)


def is_macos() -> bool:
    return platform.system() == "Darwin"


def get_system_info() -> Dict[str, str]:
    """
    Get system information for debugging.

    Returns:
        Dict[str, str]: System information
    """
    return {
        "platform": platform.system(),
        "platform_version": platform.version(),
        "python_version": platform.python_version(),
        "architecture": platform.architecture()[0],
    }


def format_error_response(error_message: str, include_system_info: bool = False) -> Dict[str, Any]:
    """
    Creates a standardized error response.

    Args:
        error_message: Error message
        include_system_info: Whether to include system information

    Returns:
        Dict[str, Any]: Error response dictionary
    """
    response = {"success": False, "error": error_message}

    if include_system_info:
        response["system_info"] = get_system_info()

    return response
