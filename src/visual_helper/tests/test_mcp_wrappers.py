#!/usr/bin/env python3
"""
Unit tests for mcp/wrappers.py and mcp/mcp_server.py
"""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from PIL import Image

from visual_helper.core.capture import CaptureResult
from visual_helper.core.errors import CaptureError
from visual_helper.mcp.mcp_server import get_server_info, main
from visual_helper.mcp.wrappers import capture_wrapper, format_mcp_response, placement_wrapper, scan_wrapper


class TestMcpWrappers(unittest.TestCase):
    """Test cases for MCP wrappers"""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_format_mcp_response(self):
        success_response = format_mcp_response(True, data={"result": "test"})
        self.assertTrue(success_response["success"])
        self.assertEqual(success_response["result"], "test")

        error_response = format_mcp_response(False, error="Test error")
        self.assertFalse(error_response["success"])
        self.assertEqual(error_response["error"], "Test error")

    def test_placement_wrapper(self):
        result = placement_wrapper(200, 300, [
            {"x": 0, "y": 0, "width": 500, "height": 300},
            {"x": 0, "y": 800, "width": 500, "height": 300},
        ])
        self.assertEqual(result, {"success": True, "x": 0, "y": 400, "zone": "vertical-gap", "verified": True})

    def test_placement_wrapper_right_fallback_unverified(self):
        result = placement_wrapper(200, 200, [{"x": 0, "y": -2900, "width": 500, "height": 100}])
        self.assertEqual(result["zone"], "right")
        self.assertFalse(result["verified"])

    def test_placement_wrapper_rejects_bad_input(self):
        self.assertFalse(placement_wrapper(0, 10)["success"])
        self.assertFalse(placement_wrapper(10, 10, padding=-1)["success"])
        self.assertIn("Invalid occupied region", placement_wrapper(10, 10, [{"x": 1}])["error"])

    @patch("visual_helper.mcp.wrappers.capture")
    def test_capture_wrapper(self, mock_capture):
        filepath = os.path.join(self.temp_dir.name, "screen_1.png")
        Image.new("RGB", (20, 10), (0, 0, 0)).save(filepath)
        mock_capture.return_value = CaptureResult(filename="screen_1.png", filepath=filepath, timestamp=1)

        result = capture_wrapper("screen", self.temp_dir.name)

        self.assertTrue(result["success"])
        self.assertEqual(result["filename"], "screen_1.png")
        self.assertEqual(result["analysis"]["analysis"]["layout"], "landscape")

    @patch("visual_helper.mcp.wrappers.capture", side_effect=CaptureError("no display"))
    def test_capture_wrapper_error(self, mock_capture):
        result = capture_wrapper("screen", self.temp_dir.name)
        self.assertFalse(result["success"])
        self.assertEqual(result["error"], "Capture failed: no display")

    def test_scan_wrapper(self):
        path = os.path.join(self.temp_dir.name, "snapshot.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"children": [{"type": "FRAME", "name": "A"}]}, f)

        result = scan_wrapper(path)
        self.assertTrue(result["success"])
        self.assertEqual(result["total_elements"], 1)

    def test_scan_wrapper_missing_file(self):
        result = scan_wrapper(os.path.join(self.temp_dir.name, "missing.json"))
        self.assertFalse(result["success"])
        self.assertIn("Snapshot not found", result["error"])


class TestMcpServer(unittest.TestCase):
    """Test cases for the MCP server entry point"""

    def test_server_info_lists_tools(self):
        self.assertEqual(get_server_info()["tools"], ["find_clear_space", "capture_screen", "scan_document"])

    def test_no_command_prints_help(self):
        self.assertEqual(main([]), 1)

    @patch("builtins.print")
    def test_info_command(self, mock_print):
        self.assertEqual(main(["info"]), 0)
        self.assertIn("Visual Helper MCP Server", mock_print.call_args[0][0])


if __name__ == "__main__":
    unittest.main()
