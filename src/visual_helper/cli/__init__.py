"""
CLI Layer for Visual Helper

This package contains the CLI (Command Line Interface) layer, providing a rich
interface for human users and a ``--json`` mode for scripts.

Usage:
    from visual_helper.cli import app

    # Run the CLI app
    app()

    # Alternative: use formatters directly
    from visual_helper.cli.formatters import print_placement_result
    print_placement_result(find_clear_space(850, 400, regions), 850, 400)
"""

# CLI application
from visual_helper.cli.cli import app, main_entry, load_obstacles

# Formatters for rich output
from visual_helper.cli.formatters import (
    print_capture_result,
    print_placement_result,
    print_document_analysis,
    print_showcase_result,
    print_error,
    print_warning,
    print_info,
    print_json,
    create_progress,
    console
)

# CLI validators
from visual_helper.cli.validators import (
    validate_target,
    validate_dimension,
    validate_padding,
    validate_file_exists,
    validate_output_dir,
    validate_json_output
)

from visual_helper.cli.schemas import format_cli_response

__all__ = [
    # CLI application
    'app',
    'main_entry',
    'load_obstacles',

    # Formatters
    'print_capture_result',
    'print_placement_result',
    'print_document_analysis',
    'print_showcase_result',
    'print_error',
    'print_warning',
    'print_info',
    'print_json',
    'create_progress',
    'console',

    # Validators
    'validate_target',
    'validate_dimension',
    'validate_padding',
    'validate_file_exists',
    'validate_output_dir',
    'validate_json_output',

    # Schemas
    'format_cli_response',
]
