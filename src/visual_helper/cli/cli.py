#!/usr/bin/env python3
"""
Command Line Interface for Visual Helper

This module provides the ``visual-helper`` CLI using Typer and Rich. It
captures the screen or the Figma window, finds clear space on a canvas,
scans document snapshots, renders the color showcase and hero image, and
starts the HTTP service.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- visual-helper capture figma --no-open
- visual-helper --json place 850 400 --obstacles snapshot.json

Expected output:
- Formatted console output of operation results
- Files saved to disk
- Structured JSON output for machine consumption
"""

import json
import sys
from typing import Any, Dict, List, Optional

import typer
from loguru import logger

from visual_helper.config import CONFIG, configure_logging
from visual_helper.core.capture import capture, open_folder
from visual_helper.core.colors import extract_showcase_colors
from visual_helper.core.document import get_current_page, load_snapshot, scan_document
from visual_helper.core.errors import VisualHelperError
from visual_helper.core.geometry import OccupiedRegion
from visual_helper.core.hero import render_hero_image
from visual_helper.core.placement import collect_occupied_regions, find_clear_space, placement_to_dict, to_region
from visual_helper.core.showcase import build_showcase, render_showcase
from visual_helper.cli.formatters import (
    print_capture_result,
    print_document_analysis,
    print_error,
    print_info,
    print_json,
    print_placement_result,
    print_showcase_result,
    create_progress,
)
from visual_helper.cli.validators import (
    validate_dimension,
    validate_file_exists,
    validate_json_output,
    validate_output_dir,
    validate_padding,
    validate_target,
)
from visual_helper.cli.schemas import format_cli_response


app = typer.Typer(
    help="Visual Helper: screen captures and canvas placement for Figma",
    rich_markup_mode="rich",
    add_completion=False
)


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON",
        callback=validate_json_output
    ),
):
    """
    Visual Helper - Captures screens and places artifacts on the Figma canvas
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json_output


def _fail(ctx: typer.Context, message: str) -> None:
    logger.error(message)
    if ctx.obj.get("json_output", False):
        print_json(format_cli_response(False, error=message))
    else:
        print_error(message)
    sys.exit(1)


def load_obstacles(path: str) -> List[OccupiedRegion]:
    """
    Read occupied regions from a JSON file.

    The file holds either a list of rectangles or a document snapshot, in
    which case the visible top-level nodes of its current page are used.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        return [to_region(item) for item in data]

    page = get_current_page(data)
    return collect_occupied_regions(page.get("children") or [])


@app.command("capture")
def capture_command(
    ctx: typer.Context,
    target: str = typer.Argument(
        "screen",
        help="What to capture: screen, interactive or figma",
        callback=validate_target
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir", "-o",
        help="Directory for captures. Defaults to VISUAL_HELPER_CAPTURES_DIR.",
        callback=validate_output_dir
    ),
    open_after: bool = typer.Option(
        True,
        "--open/--no-open",
        help="Open the captures folder afterwards"
    ),
):
    """
    Capture the screen, a selected area, or the Figma window.
    """
    json_output = ctx.obj.get("json_output", False)
    try:
        if json_output or target == "interactive":
            result = capture(target, captures_dir=output_dir)
        else:
            with create_progress() as progress:
                task = progress.add_task(f"Capturing {target}...", total=None)
                result = capture(target, captures_dir=output_dir)
                progress.update(task, description="Captured")
    except (VisualHelperError, OSError) as e:
        _fail(ctx, f"Capture failed: {str(e)}")

    if json_output:
        print_json(format_cli_response(True, data=result.model_dump()))
    else:
        print_capture_result(result)

    if open_after:
        open_folder(output_dir)


@app.command("place")
def place_command(
    ctx: typer.Context,
    width: float = typer.Argument(..., help="Width of the artifact", callback=validate_dimension),
    height: float = typer.Argument(..., help="Height of the artifact", callback=validate_dimension),
    obstacles: Optional[str] = typer.Option(
        None,
        "--obstacles", "-f",
        help="JSON file with a list of rectangles or a document snapshot",
        callback=validate_file_exists
    ),
    padding: float = typer.Option(
        CONFIG["placement"]["padding"],
        "--padding", "-p",
        help="Clearance around the artifact",
        callback=validate_padding
    ),
    fix_rightmost: bool = typer.Option(
        False,
        "--fix-rightmost",
        help="Anchor the fallback on the largest right edge instead of the largest left edge"
    ),
):
    """
    Find a clear spot on the canvas for a WIDTH x HEIGHT artifact.
    """
    try:
        regions = load_obstacles(obstacles) if obstacles else []
    except (VisualHelperError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        _fail(ctx, f"Cannot read obstacles from {obstacles}: {str(e)}")

    result = find_clear_space(width, height, regions, padding=padding, rightmost_by_right_edge=fix_rightmost)

    if ctx.obj.get("json_output", False):
        data: Dict[str, Any] = placement_to_dict(result)
        data.update({"width": width, "height": height, "obstacles": len(regions)})
        print_json(format_cli_response(True, data=data))
    else:
        print_placement_result(result, width, height)


@app.command("scan")
def scan_command(
    ctx: typer.Context,
    snapshot: str = typer.Argument(..., help="Document snapshot JSON file", callback=validate_file_exists),
):
    """
    Analyze the current page of a document snapshot.
    """
    try:
        analysis = scan_document(load_snapshot(snapshot))
    except VisualHelperError as e:
        _fail(ctx, str(e))

    if ctx.obj.get("json_output", False):
        print_json(format_cli_response(True, data=analysis.model_dump()))
    else:
        print_document_analysis(analysis)


@app.command("showcase")
def showcase_command(
    ctx: typer.Context,
    snapshot: str = typer.Argument(..., help="Document snapshot JSON file", callback=validate_file_exists),
    output: str = typer.Option("color_showcase.png", "--output", "-o", help="PNG file to render"),
    padding: float = typer.Option(
        CONFIG["placement"]["padding"],
        "--padding", "-p",
        help="Clearance between the showcase and existing content",
        callback=validate_padding
    ),
):
    """
    Lay out the color showcase next to existing content and render it.
    """
    try:
        layout = build_showcase(load_snapshot(snapshot), padding=padding)
        path = render_showcase(layout, output)
    except (VisualHelperError, OSError, KeyError, TypeError, ValueError) as e:
        _fail(ctx, f"Showcase failed: {str(e)}")

    if ctx.obj.get("json_output", False):
        print_json(format_cli_response(True, data={
            "output": str(path),
            "placement": placement_to_dict(layout.placement),
            "frame": layout.frame.to_dict(),
            "colors": [{"name": card.swatch.name, "hex": card.hex} for card in layout.cards],
            "notes": [note.text for note in layout.notes],
        }))
    else:
        print_showcase_result(layout, str(path))


@app.command("hero")
def hero_command(
    ctx: typer.Context,
    snapshot: Optional[str] = typer.Option(
        None,
        "--snapshot", "-s",
        help="Take the palette from this document snapshot",
        callback=validate_file_exists
    ),
    output: str = typer.Option("hero.png", "--output", "-o", help="PNG file to render"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible 'before' grid"),
):
    """
    Render the before/after color grid hero image.
    """
    try:
        colors = extract_showcase_colors(load_snapshot(snapshot)) if snapshot else None
        path = render_hero_image(colors, output, seed=seed)
    except (VisualHelperError, OSError, KeyError, TypeError, ValueError) as e:
        _fail(ctx, f"Hero image failed: {str(e)}")

    if ctx.obj.get("json_output", False):
        print_json(format_cli_response(True, data={"output": str(path), "colors": len(colors or [])}))
    else:
        print_info(f"Hero image saved to: {path}", title="Hero Image")


@app.command("serve")
def serve_command(
    ctx: typer.Context,
    host: str = typer.Option(CONFIG["server"]["host"], "--host", help="Interface to bind"),
    port: int = typer.Option(CONFIG["server"]["port"], "--port", "-p", help="Port to listen on"),
    captures_dir: Optional[str] = typer.Option(
        None,
        "--captures-dir",
        help="Directory for captures and exports",
        callback=validate_output_dir
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Start the Visual Helper HTTP service.
    """
    # Imported here so the other commands do not load the web stack
    from visual_helper.server.app import run_server

    configure_logging("DEBUG" if debug else CONFIG["logging"]["level"])
    run_server(host=host, port=port, captures_dir=captures_dir, log_level="debug" if debug else "info")


def main_entry() -> None:
    """Console script entry point."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{level}: {message}</level>",
        level="WARNING",
        colorize=True
    )
    app()


if __name__ == "__main__":
    """
    CLI entry point for Visual Helper.

    Examples:
      python -m visual_helper.cli.cli capture figma
      python -m visual_helper.cli.cli place 850 400 --obstacles snapshot.json
      python -m visual_helper.cli.cli showcase snapshot.json --output showcase.png
    """
    main_entry()
