#!/usr/bin/env python3
"""
Unit tests for the cli package
"""

import json
import os
import tempfile
import unittest
from io import StringIO
from unittest.mock import patch

from typer.testing import CliRunner

from visual_helper.cli.cli import app, load_obstacles
from visual_helper.cli.formatters import (
    console,
    print_error,
    print_warning,
    print_info,
    print_json,
    print_placement_result,
    print_document_analysis,
)
from visual_helper.cli.schemas import format_cli_response
from visual_helper.core.capture import CaptureResult
from visual_helper.core.document import scan_document
from visual_helper.core.placement import PlacementResult, Zone

SNAPSHOT = {
    "document": {"children": [{
        "type": "PAGE",
        "children": [
            {
                "id": "1:1",
                "type": "FRAME",
                "name": "Hero",
                "absoluteBoundingBox": {"x": 0, "y": 0, "width": 500, "height": 300},
                "fills": [{"type": "SOLID", "color": {"r": 0, "g": 0, "b": 1}}],
            },
            {
                "id": "1:2",
                "type": "TEXT",
                "name": "Hidden note",
                "visible": False,
                "absoluteBoundingBox": {"x": 0, "y": 350, "width": 500, "height": 50},
            },
        ],
    }]},
    "paintStyles": [{"name": "Primary", "paints": [{"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0}}]}],
}


class TestFormatters(unittest.TestCase):
    """Test cases for rich formatters"""

    def setUp(self):
        # Redirect rich console output to StringIO
        self.console_output = StringIO()
        console.file = self.console_output

    def tearDown(self):
        # Back to following sys.stdout so CliRunner can capture output
        console.file = None

    def test_message_panels(self):
        print_error("Test error")
        print_warning("Test warning")
        print_info("Test info")
        output = self.console_output.getvalue()

        for text in ("Error", "Test error", "Warning", "Test warning", "Info", "Test info"):
            self.assertIn(text, output)

    def test_print_json(self):
        print_json({"name": "test", "value": 123})
        output = self.console_output.getvalue()

        self.assertIn("JSON Output", output)
        self.assertIn("123", output)

    def test_print_placement_result(self):
        print_placement_result(PlacementResult(x=600, y=-2900, zone=Zone.RIGHT), 200, 200)
        output = self.console_output.getvalue()

        self.assertIn("x:600, y:-2900", output)
        self.assertIn("right", output)
        self.assertIn("not checked for overlaps", output)

    def test_print_document_analysis(self):
        print_document_analysis(scan_document(SNAPSHOT))
        output = self.console_output.getvalue()

        self.assertIn("Element Types", output)
        self.assertIn("FRAME", output)


class TestSchemas(unittest.TestCase):
    """Test cases for the JSON envelope"""

    def test_format_cli_response(self):
        self.assertEqual(format_cli_response(True, data={"x": 1}), {"success": True, "data": {"x": 1}})
        self.assertEqual(format_cli_response(False, error="boom"), {"success": False, "error": "boom"})
        self.assertEqual(format_cli_response(True), {"success": True})


class TestCommands(unittest.TestCase):
    """Test cases for CLI commands"""

    def setUp(self):
        self.runner = CliRunner()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.snapshot_path = self._write("snapshot.json", SNAPSHOT)

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, name, data):
        path = os.path.join(self.temp_dir.name, name)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        return path

    def test_load_obstacles_from_list(self):
        path = self._write("rects.json", [{"x": 0, "y": 0, "width": 10, "height": 10}])
        self.assertEqual(len(load_obstacles(path)), 1)

    def test_load_obstacles_from_snapshot_skips_hidden(self):
        regions = load_obstacles(self.snapshot_path)
        self.assertEqual([r.name for r in regions], ["Hero"])

    def test_place_empty_canvas(self):
        result = self.runner.invoke(app, ["place", "850", "400"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("empty-canvas", result.stdout)

    def test_place_with_snapshot_obstacles(self):
        result = self.runner.invoke(app, ["place", "850", "400", "--obstacles", self.snapshot_path])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("x:0, y:-500", result.stdout)
        self.assertIn("above", result.stdout)

    def test_place_rejects_negative_size(self):
        result = self.runner.invoke(app, ["place", "--", "-5", "400"])
        self.assertEqual(result.exit_code, 1)

    def test_place_missing_obstacles_file(self):
        result = self.runner.invoke(app, ["place", "10", "10", "--obstacles", "missing.json"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("File not found", result.stdout)

    def test_place_bad_obstacles(self):
        path = self._write("bad.json", [{"x": 0}])
        result = self.runner.invoke(app, ["--json", "place", "10", "10", "--obstacles", path])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Cannot read obstacles", result.stdout)

    def test_scan(self):
        result = self.runner.invoke(app, ["scan", self.snapshot_path])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Document Scan", result.stdout)

    def test_showcase_renders_png(self):
        output = os.path.join(self.temp_dir.name, "showcase.png")
        result = self.runner.invoke(app, ["showcase", self.snapshot_path, "--output", output])

        self.assertEqual(result.exit_code, 0)
        self.assertTrue(os.path.exists(output))
        self.assertIn("Primary", result.stdout)

    def test_showcase_malformed_bounds(self):
        path = self._write("broken.json", {"children": [
            {"id": "1:1", "name": "Broken", "absoluteBoundingBox": {"x": 0, "y": 0}},
        ]})
        result = self.runner.invoke(app, ["showcase", path, "--output", os.path.join(self.temp_dir.name, "s.png")])

        self.assertEqual(result.exit_code, 1)
        self.assertIsInstance(result.exception, SystemExit)
        self.assertIn("Showcase failed", result.stdout)

    def test_hero_malformed_snapshot(self):
        path = self._write("broken.json", {"children": [
            {"name": "Partial", "fills": [{"type": "SOLID", "color": {"r": 1}}]},
        ]})
        result = self.runner.invoke(app, ["hero", "--snapshot", path, "--output", os.path.join(self.temp_dir.name, "h.png")])

        self.assertEqual(result.exit_code, 1)
        self.assertIsInstance(result.exception, SystemExit)

    def test_hero_json(self):
        output = os.path.join(self.temp_dir.name, "hero.png")
        result = self.runner.invoke(app, ["--json", "hero", "--snapshot", self.snapshot_path, "--output", output, "--seed", "1"])

        self.assertEqual(result.exit_code, 0)
        self.assertTrue(os.path.exists(output))
        self.assertIn('"success": true', result.stdout)

    def test_capture_rejects_unknown_target(self):
        result = self.runner.invoke(app, ["capture", "window"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid capture target", result.stdout)

    @patch("visual_helper.cli.cli.open_folder")
    @patch("visual_helper.cli.cli.capture")
    def test_capture_figma(self, mock_capture, mock_open):
        captures = os.path.join(self.temp_dir.name, "captures")
        mock_capture.return_value = CaptureResult(
            filename="figma_1.png", filepath=os.path.join(captures, "figma_1.png"), timestamp=1, app="Figma"
        )
        result = self.runner.invoke(app, ["capture", "figma", "--output-dir", captures])

        self.assertEqual(result.exit_code, 0)
        mock_capture.assert_called_once_with("figma", captures_dir=captures)
        mock_open.assert_called_once_with(captures)
        self.assertIn("Figma Window Captured", result.stdout)

    @patch("visual_helper.cli.cli.open_folder")
    @patch("visual_helper.cli.cli.capture")
    def test_capture_failure(self, mock_capture, mock_open):
        from visual_helper.core.errors import CaptureError

        mock_capture.side_effect = CaptureError("no display")
        captures = os.path.join(self.temp_dir.name, "captures")
        result = self.runner.invoke(app, ["capture", "--output-dir", captures, "--no-open"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("no display", result.stdout)
        mock_open.assert_not_called()


if __name__ == "__main__":
    unittest.main()
