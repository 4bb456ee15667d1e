#!/usr/bin/env python3
"""
Image Processing for Visual Helper

This module provides the Pillow helpers used on captured and exported images:
downscaling, dominant color extraction, basic analysis and a pixel comparison
between two captures.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- analyze_image("captures/screen_1718000000000.png")
- compare_images("captures/screen_1.png", "captures/screen_2.png")

Expected output:
- {"size": 123456, "created": "...", "analysis": {"width": 2880, "height": 1800, "colors": ["#1E1E1E", ...], ...}}
- {"similarity": 0.97, "differences": [{"x": 10, "y": 20, "width": 300, "height": 40}], "analysis": "..."}
"""

import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Union

from loguru import logger
from PIL import Image, ImageChops, ImageStat

from visual_helper.core.constants import IMAGE_SETTINGS

PathLike = Union[str, os.PathLike]


def resize_image_if_needed(
    img: Image.Image,
    max_width: int = IMAGE_SETTINGS["ANALYSIS_MAX_SIZE"],
    max_height: int = IMAGE_SETTINGS["ANALYSIS_MAX_SIZE"]
) -> Image.Image:
    """
    Resizes an image if it exceeds maximum dimensions while preserving aspect ratio.

    Args:
        img: PIL Image object to resize
        max_width: Maximum width allowed
        max_height: Maximum height allowed

    Returns:
        PIL.Image: Resized image or original if no resize needed
    """
    width, height = img.size
    if width <= max_width and height <= max_height:
        return img

    scale_factor = min(max_width / width, max_height / height)
    new_width = max(1, int(width * scale_factor))
    new_height = max(1, int(height * scale_factor))

    logger.debug(f"Resizing image from {width}x{height} to {new_width}x{new_height}")
    return img.resize((new_width, new_height), Image.LANCZOS)


def ensure_rgb(img: Image.Image) -> Image.Image:
    """
    Converts image to RGB mode, flattening transparency onto white.

    Args:
        img: PIL Image object to convert

    Returns:
        PIL.Image: Image in RGB mode
    """
    if img.mode == 'RGBA':
        background = Image.new('RGB', img.size, (255, 255, 255))
        background.paste(img, mask=img.split()[3])
        return background
    elif img.mode != 'RGB':
        return img.convert('RGB')
    return img


def dominant_colors(img: Image.Image, count: int = IMAGE_SETTINGS["DOMINANT_COLORS"]) -> List[str]:
    """
    Find the most common colors of an image.

    Args:
        img: PIL Image object
        count: Number of colors to return

    Returns:
        List[str]: Hex colors, most frequent first
    """
    small = ensure_rgb(resize_image_if_needed(img))
    quantized = small.quantize(colors=max(count, 1))
    palette = quantized.getpalette() or []
    counts = sorted(quantized.getcolors() or [], reverse=True)

    colors = []
    for _, index in counts[:count]:
        r, g, b = palette[index * 3:index * 3 + 3]
        colors.append(f"#{r:02X}{g:02X}{b:02X}")
    return colors


def analyze_image(filepath: PathLike) -> Dict[str, Any]:
    """
    Collect file and image metadata for a capture.

    Args:
        filepath: Path to the image

    Returns:
        Dict[str, Any]: size, created, and an analysis block with the
        dimensions, dominant colors and orientation
    """
    stats = os.stat(filepath)
    created = getattr(stats, "st_birthtime", stats.st_mtime)

    with Image.open(filepath) as img:
        width, height = img.size
        colors = dominant_colors(img)

    if width > height:
        layout = "landscape"
    elif height > width:
        layout = "portrait"
    else:
        layout = "square"

    return {
        "size": stats.st_size,
        "created": datetime.fromtimestamp(created, tz=timezone.utc).isoformat(),
        "analysis": {
            "description": "Image captured successfully",
            "width": width,
            "height": height,
            "elements": [],
            "colors": colors,
            "layout": layout,
        },
    }


def compare_images(before_path: PathLike, after_path: PathLike) -> Dict[str, Any]:
    """
    Compare two images pixel by pixel.

    The "after" image is resized to the "before" size when they differ.
    Similarity is 1 minus the mean channel difference scaled to [0, 1].

    Args:
        before_path: Reference image
        after_path: Image to compare against the reference

    Returns:
        Dict[str, Any]: similarity, differences (bounding box of changed
        pixels) and a short textual analysis
    """
    with Image.open(before_path) as before_img, Image.open(after_path) as after_img:
        before = ensure_rgb(before_img)
        after = ensure_rgb(after_img)
        if after.size != before.size:
            logger.debug(f"Resizing {after.size} to {before.size} for comparison")
            after = after.resize(before.size, Image.LANCZOS)

        diff = ImageChops.difference(before, after)
        mean = sum(ImageStat.Stat(diff).mean) / 3
        bbox = diff.getbbox()

    similarity = round(1 - mean / 255, 4)
    differences = []
    if bbox:
        left, top, right, bottom = bbox
        differences.append({"x": left, "y": top, "width": right - left, "height": bottom - top})

    if not differences:
        analysis = "Images are identical"
    elif similarity >= 0.9:
        analysis = "Images are visually similar"
    else:
        analysis = "Images differ noticeably"

    return {"similarity": similarity, "differences": differences, "analysis": analysis}
