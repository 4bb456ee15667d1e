#!/usr/bin/env python3
"""
Screen Capture Module

This module captures the screen, a user-selected area, or the Figma window.
On macOS it shells out to the native ``screencapture`` command; elsewhere, or
when that command fails, it grabs the primary monitor with MSS.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- capture("screen", captures_dir="captures")
- capture("figma", captures_dir="captures")

Expected output:
- CaptureResult(filename="screen_1718000000000.png", filepath="captures/screen_1718000000000.png",
                timestamp=1718000000000, app=None, method="screencapture")
- CaptureResult(filename="figma_1718000000000.png", ..., app="Figma")
"""

import os
import subprocess
import time
from typing import List, Optional

import mss
import mss.exception
from loguru import logger
from PIL import Image
from pydantic import BaseModel

from visual_helper.core.constants import CAPTURE_TARGETS
from visual_helper.core.errors import CaptureError
from visual_helper.core.utils import ensure_directory, generate_filename, is_macos, timestamp_ms

FIGMA_APP = "Figma"


class CaptureResult(BaseModel):
    """A capture written to the captures directory."""

    filename: str
    filepath: str
    timestamp: int
    app: Optional[str] = None
    method: str = "screencapture"


def _run(command: List[str]) -> str:
    logger.debug(f"Running: {' '.join(command)}")
    completed = subprocess.run(command, check=True, capture_output=True, text=True)
    return completed.stdout.strip()


def _new_capture(prefix: str, captures_dir: str) -> CaptureResult:
    if not ensure_directory(captures_dir):
        raise CaptureError(f"Cannot create captures directory: {captures_dir}")

    timestamp = timestamp_ms()
    filename = generate_filename(prefix, "png", timestamp)
    return CaptureResult(
        filename=filename,
        filepath=os.path.join(captures_dir, filename),
        timestamp=timestamp,
    )


def grab_primary_monitor(filepath: str) -> None:
    """
    Save a full grab of the primary monitor as PNG using MSS.

    Raises:
        CaptureError: If MSS cannot grab the screen
    """
    try:
        with mss.mss() as sct:
            monitor = sct.monitors[1]
            logger.info(f"Selected monitor: {monitor}")
            sct_img = sct.grab(monitor)
            img = Image.frombytes("RGB", sct_img.size, sct_img.bgra, "raw", "BGRX")
    except mss.exception.ScreenShotError as e:
        raise CaptureError(f"Screenshot capture failed: {str(e)}") from e

    img.save(filepath, format="PNG")


def capture_screen(captures_dir: str = "captures", prefix: str = "screen") -> CaptureResult:
    """
    Capture the entire screen.

    Args:
        captures_dir: Directory to save the capture
        prefix: Filename prefix

    Returns:
        CaptureResult: The saved capture

    Raises:
        CaptureError: If neither screencapture nor MSS produced an image
    """
    result = _new_capture(prefix, captures_dir)

    if is_macos():
        try:
            _run(["screencapture", "-x", result.filepath])
            logger.info(f"📸 Screen captured: {result.filename}")
            return result
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            logger.error(f"Screenshot failed: {e}")

    try:
        grab_primary_monitor(result.filepath)
    except (CaptureError, OSError) as e:
        logger.error(f"Fallback screenshot also failed: {e}")
        raise CaptureError(str(e)) from e

    logger.info(f"📸 Screen captured (fallback): {result.filename}")
    return result.model_copy(update={"method": "mss"})


def capture_interactive(captures_dir: str = "captures") -> CaptureResult:
    """
    Let the user drag a selection and capture it.

    Raises:
        CaptureError: If not on macOS or the selection was cancelled
    """
    if not is_macos():
        raise CaptureError("Interactive capture requires macOS screencapture")

    result = _new_capture("interactive", captures_dir)
    try:
        _run(["screencapture", "-i", "-x", result.filepath])
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        raise CaptureError(f"Interactive capture failed: {e}") from e

    # screencapture exits cleanly when the selection is cancelled
    if not os.path.exists(result.filepath):
        raise CaptureError("Interactive capture was cancelled")

    logger.info(f"✓ Saved to: {result.filename}")
    return result


def activate_app(app_name: str = FIGMA_APP, delay: float = 0.5) -> None:
    """Bring an application to the front and give it time to redraw."""
    _run(["osascript", "-e", f'tell application "{app_name}" to activate'])
    time.sleep(delay)


def capture_figma_window(captures_dir: str = "captures") -> CaptureResult:
    """
    Capture the front Figma window.

    Falls back to a full screen capture (still named ``figma_*``) when the
    window cannot be captured directly.

    Returns:
        CaptureResult: The saved capture with app set to "Figma"
    """
    result = _new_capture("figma", captures_dir).model_copy(update={"app": FIGMA_APP})

    if is_macos():
        try:
            activate_app(FIGMA_APP)
            window_id = _run(["osascript", "-e", f'tell app "{FIGMA_APP}" to id of window 1'])
            _run(["screencapture", "-x", f"-l{window_id}", result.filepath])
            logger.info(f"🎨 Figma window captured: {result.filename}")
            return result
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            logger.error(f"Figma capture failed, falling back to full screen: {e}")

    fallback = capture_screen(captures_dir, prefix="figma")
    return fallback.model_copy(update={"app": FIGMA_APP})


def capture(target: str = "screen", captures_dir: str = "captures") -> CaptureResult:
    """
    Capture by target name: screen, interactive or figma.

    Raises:
        ValueError: If the target is unknown
        CaptureError: If the capture failed
    """
    if target == "screen":
        return capture_screen(captures_dir)
    if target == "interactive":
        return capture_interactive(captures_dir)
    if target == "figma":
        return capture_figma_window(captures_dir)

    raise ValueError(f"Unknown capture target '{target}', expected one of {', '.join(CAPTURE_TARGETS)}")


def open_folder(path: str) -> bool:
    """
    Open a folder in the platform file browser.

    Returns:
        bool: True if the opener ran successfully
    """
    opener = "open" if is_macos() else "xdg-open"
    try:
        _run([opener, path])
        return True
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        logger.warning(f"Could not open {path}: {e}")
        return False
