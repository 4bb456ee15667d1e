#!/usr/bin/env python3
"""
Formatters for Visual Helper CLI

This module provides rich formatting utilities for the CLI presentation layer:
panels for captures, placement results and messages, and tables for
document analysis.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- CaptureResult, PlacementResult or DocumentAnalysis objects
- Error messages

Expected output:
- Rich formatted tables, panels, and progress indicators
"""

import json
import os
from typing import Any, Dict

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TimeElapsedColumn
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from visual_helper.core.capture import CaptureResult
from visual_helper.core.document import DocumentAnalysis
from visual_helper.core.placement import PlacementResult
from visual_helper.core.showcase import ShowcaseLayout


# Initialize console
console = Console()


# Color scheme
COLORS = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "blue",
    "path": "cyan",
    "highlight": "magenta",
    "dim": "grey70",
}


def _message_panel(message: str, title: str, color: str) -> None:
    panel = Panel(
        Text(message, style=COLORS[color]),
        title=f"[bold {COLORS[color]}]{title}",
        border_style=COLORS[color],
        padding=(1, 2)
    )
    console.print(panel)


def print_error(message: str, title: str = "Error") -> None:
    """
    Format and print error message to the console.

    Args:
        message: Error message
        title: Panel title
    """
    _message_panel(message, title, "error")


def print_warning(message: str, title: str = "Warning") -> None:
    """
    Format and print warning message to the console.

    Args:
        message: Warning message
        title: Panel title
    """
    _message_panel(message, title, "warning")


def print_info(message: str, title: str = "Info") -> None:
    _message_panel(message, title, "info")


def print_json(data: Dict[str, Any], title: str = "JSON Output") -> None:
    """
    Format and print JSON data to the console.

    Args:
        data: JSON data
        title: Panel title
    """
    json_str = json.dumps(data, indent=2, default=str)
    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=True)

    panel = Panel(
        syntax,
        title=f"[bold {COLORS['info']}]{title}",
        border_style=COLORS["info"],
        padding=(1, 2)
    )

    console.print(panel)


def print_capture_result(result: CaptureResult) -> None:
    """
    Format and print a saved capture.

    Args:
        result: The capture written to disk
    """
    info = Text()
    info.append("Filename: ", style=COLORS["dim"])
    info.append(f"{result.filename}\n", style=COLORS["path"])
    info.append("Directory: ", style=COLORS["dim"])
    info.append(f"{os.path.dirname(result.filepath) or '.'}\n", style=COLORS["path"])
    info.append("Method: ", style=COLORS["dim"])
    info.append(result.method, style=COLORS["highlight"])

    if os.path.exists(result.filepath):
        size_kb = os.path.getsize(result.filepath) / 1024
        info.append("\nSize: ", style=COLORS["dim"])
        info.append(f"{size_kb:.1f} KB", style=COLORS["info"])

    title = f"{result.app} Window Captured" if result.app else "Screen Captured"
    console.print(Panel(
        info,
        title=f"[bold green]{title}",
        border_style=COLORS["success"],
        padding=(1, 2)
    ))


def print_placement_result(result: PlacementResult, width: float, height: float) -> None:
    """Format and print where an artifact of the given size was placed."""
    info = Text()
    info.append("Position: ", style=COLORS["dim"])
    info.append(f"x:{result.x:g}, y:{result.y:g}\n", style=COLORS["highlight"])
    info.append("Size: ", style=COLORS["dim"])
    info.append(f"{width:g} x {height:g}\n", style=COLORS["info"])
    info.append("Zone: ", style=COLORS["dim"])
    info.append(result.zone.value, style=COLORS["path"])

    # Right-hand fallback is never checked against existing content
    if not result.verified:
        info.append("\n\nFallback position, not checked for overlaps", style=COLORS["warning"])

    console.print(Panel(
        info,
        title="[bold green]Clear Space Found",
        border_style=COLORS["success"] if result.verified else COLORS["warning"],
        padding=(1, 2)
    ))


def _counts_table(title: str, label: str, counts: Dict[str, int]) -> Table:
    table = Table(title=title)
    table.add_column(label, style=COLORS["highlight"])
    table.add_column("Count", justify="right", style=COLORS["info"])
    for name, count in sorted(counts.items(), key=lambda item: item[1], reverse=True):
        table.add_row(name, str(count))
    return table


def print_document_analysis(analysis: DocumentAnalysis) -> None:
    """
    Format and print a document analysis as tables.

    Args:
        analysis: Result of scanning a document snapshot
    """
    print_info(
        f"Elements: {analysis.total_elements}\n"
        f"Component instances: {len(analysis.component_instances)}\n"
        f"Library elements: {len(analysis.library_elements)}",
        title="Document Scan"
    )

    if analysis.element_types:
        console.print(_counts_table("Element Types", "Type", analysis.element_types))
    if analysis.color_palette:
        console.print(_counts_table("Fill Colors", "RGB", analysis.color_palette))
    if analysis.text_styles:
        console.print(_counts_table("Text Styles", "Font", analysis.text_styles))

    if analysis.spatial_zones:
        table = Table(title="Viewport Zones")
        table.add_column("Zone", style=COLORS["highlight"])
        for column in ("X", "Y", "Width", "Height"):
            table.add_column(column, justify="right", style=COLORS["info"])
        for zone in analysis.spatial_zones:
            table.add_row(zone.name, f"{zone.x:g}", f"{zone.y:g}", f"{zone.width:g}", f"{zone.height:g}")
        console.print(table)


def print_showcase_result(layout: ShowcaseLayout, path: str) -> None:
    """Format and print the rendered showcase and its swatches."""
    table = Table(title=layout.subtitle.text)
    table.add_column("Name", style=COLORS["highlight"])
    table.add_column("Hex", style=COLORS["path"])
    table.add_column("Source", style=COLORS["dim"])
    for card in layout.cards:
        table.add_row(card.label, card.hex, card.swatch.source.value)
    console.print(table)

    for note in layout.notes:
        print_warning(note.text, title="Note")

    print_info(
        f"Showcase placed at x:{layout.placement.x:g}, y:{layout.placement.y:g} "
        f"({layout.placement.zone.value})\nSaved to: {path}",
        title="Color Showcase"
    )


def create_progress() -> Progress:
    """
    Create a transient progress indicator on the shared console.

    Returns:
        Progress: Rich progress indicator
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
