#!/usr/bin/env python3
"""
Validators for Visual Helper CLI

This module provides Typer callbacks that validate CLI inputs: capture
targets, artifact dimensions, padding, files and output directories.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- CLI parameter values

Expected output:
- Validated and processed parameter values
- Friendly error panels and exit code 1 on invalid input
"""

import os
from typing import Optional

import typer
from loguru import logger

from visual_helper.config import CONFIG
from visual_helper.core.constants import CAPTURE_TARGETS
from visual_helper.cli.formatters import print_error


def validate_target(ctx: typer.Context, value: str) -> str:
    """
    Typer callback for validating the capture target.

    Args:
        ctx: Typer context
        value: Target name from CLI

    Returns:
        str: Lower-cased target name
    """
    target = value.lower()
    if target not in CAPTURE_TARGETS:
        logger.error(f"Invalid capture target: {value}")
        print_error(f"Invalid capture target: {value}. Must be one of {', '.join(CAPTURE_TARGETS)}.")
        raise typer.Exit(1)
    return target


def validate_dimension(ctx: typer.Context, value: float) -> float:
    """Typer callback rejecting zero or negative widths and heights."""
    if value <= 0:
        print_error(f"Dimensions must be positive, got {value:g}")
        raise typer.Exit(1)
    return value


def validate_padding(ctx: typer.Context, value: float) -> float:
    if value < 0:
        print_error(f"Padding cannot be negative, got {value:g}")
        raise typer.Exit(1)
    return value


def validate_file_exists(ctx: typer.Context, value: Optional[str]) -> Optional[str]:
    """
    Typer callback for validating a file exists.

    Args:
        ctx: Typer context
        value: File path from CLI

    Returns:
        Optional[str]: Validated file path
    """
    if value is None:
        return None

    if not os.path.exists(value):
        print_error(f"File not found: {value}")
        raise typer.Exit(1)

    if not os.path.isfile(value):
        print_error(f"Not a file: {value}")
        raise typer.Exit(1)

    return value


def validate_output_dir(ctx: typer.Context, value: Optional[str]) -> str:
    """
    Typer callback for validating output directory.

    Args:
        ctx: Typer context
        value: Output directory from CLI

    Returns:
        str: Validated output directory
    """
    if value is None:
        value = CONFIG["captures"]["dir"]

    try:
        os.makedirs(value, exist_ok=True)
        return value
    except OSError as e:
        print_error(f"Cannot create output directory: {value}. Error: {str(e)}")
        raise typer.Exit(1)


def validate_json_output(ctx: typer.Context, value: bool) -> bool:
    """
    Typer callback for validating JSON output option.

    Args:
        ctx: Typer context
        value: JSON output flag from CLI

    Returns:
        bool: Validated JSON output flag
    """
    # Store in context for other callbacks to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = value
    return value
