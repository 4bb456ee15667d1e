"""
Configuration Module for Visual Helper.

Description:
Centralizes the settings for the capture server, the capture directory, the
placement padding and logging. Values come from environment variables,
optionally loaded from a .env file.

Third-Party Package Documentation:
- python-dotenv: https://github.com/theskumar/python-dotenv

Sample Input:
Environment variables (e.g., in .env file or exported):
VISUAL_HELPER_HOST="127.0.0.1"
VISUAL_HELPER_PORT=3001
VISUAL_HELPER_CAPTURES_DIR="captures"
VISUAL_HELPER_PADDING=100
VISUAL_HELPER_MONITOR_INTERVAL=5
VISUAL_HELPER_LOG_LEVEL="INFO"

Expected Output (when imported):
from visual_helper.config import CONFIG
print(CONFIG["server"]["port"])  # 3001
"""

import os
import sys

from dotenv import load_dotenv
from loguru import logger

# Load environment variables from .env file if it exists
load_dotenv()

CONFIG = {
    "server": {
        "host": os.getenv("VISUAL_HELPER_HOST", "127.0.0.1"),
        "port": int(os.getenv("VISUAL_HELPER_PORT", "3001")),
        "monitor_interval": float(os.getenv("VISUAL_HELPER_MONITOR_INTERVAL", "5")),
    },
    "captures": {
        "dir": os.getenv("VISUAL_HELPER_CAPTURES_DIR", "captures"),
    },
    "placement": {
        "padding": float(os.getenv("VISUAL_HELPER_PADDING", "100")),
    },
    "logging": {
        "level": os.getenv("VISUAL_HELPER_LOG_LEVEL", "INFO"),
        "dir": os.getenv("VISUAL_HELPER_LOG_DIR", "logs"),
    },
}


def configure_logging(level: str = CONFIG["logging"]["level"], log_dir: str = CONFIG["logging"]["dir"]) -> None:
    """
    Configure logging with proper format and level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the rotating log file
    """
    os.makedirs(log_dir, exist_ok=True)

    # Remove default handlers
    logger.remove()

    logger.add(
        os.path.join(log_dir, "visual_helper.log"),
        rotation="10 MB",
        retention="1 week",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
    )

    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | {message}",
        level=level,
        colorize=True
    )


if __name__ == "__main__":
    import json

    print(json.dumps(CONFIG, indent=2))
