#!/usr/bin/env python3
"""
Unit tests for core/capture.py, core/image_processing.py and core/utils.py
"""

import os
import subprocess
import tempfile
import unittest
from unittest.mock import patch

from PIL import Image

from visual_helper.core.capture import capture, capture_figma_window, capture_interactive, capture_screen, open_folder
from visual_helper.core.errors import CaptureError
from visual_helper.core.image_processing import analyze_image, compare_images, dominant_colors, resize_image_if_needed
from visual_helper.core.utils import format_error_response, generate_filename, sanitize_name


def fake_grab(filepath):
    Image.new("RGB", (40, 20), (10, 20, 30)).save(filepath, format="PNG")


class TestCapture(unittest.TestCase):
    """Test cases for screen capture with the OS calls mocked"""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.captures = os.path.join(self.temp_dir.name, "captures")

    def tearDown(self):
        self.temp_dir.cleanup()

    @patch("visual_helper.core.capture.grab_primary_monitor", side_effect=fake_grab)
    @patch("visual_helper.core.capture.is_macos", return_value=False)
    def test_screen_uses_mss_off_macos(self, mock_macos, mock_grab):
        result = capture_screen(self.captures)

        self.assertEqual(result.method, "mss")
        self.assertTrue(result.filename.startswith("screen_"))
        self.assertTrue(result.filename.endswith(".png"))
        self.assertTrue(os.path.exists(result.filepath))

    @patch("visual_helper.core.capture._run")
    @patch("visual_helper.core.capture.is_macos", return_value=True)
    def test_screen_uses_screencapture_on_macos(self, mock_macos, mock_run):
        result = capture_screen(self.captures)

        self.assertEqual(result.method, "screencapture")
        mock_run.assert_called_once_with(["screencapture", "-x", result.filepath])

    @patch("visual_helper.core.capture.grab_primary_monitor", side_effect=fake_grab)
    @patch("visual_helper.core.capture._run", side_effect=subprocess.CalledProcessError(1, "screencapture"))
    @patch("visual_helper.core.capture.is_macos", return_value=True)
    def test_screen_falls_back_when_screencapture_fails(self, mock_macos, mock_run, mock_grab):
        self.assertEqual(capture_screen(self.captures).method, "mss")

    @patch("visual_helper.core.capture.grab_primary_monitor", side_effect=CaptureError("no display"))
    @patch("visual_helper.core.capture.is_macos", return_value=False)
    def test_screen_raises_when_fallback_fails(self, mock_macos, mock_grab):
        with self.assertRaises(CaptureError):
            capture_screen(self.captures)

    @patch("visual_helper.core.capture.time.sleep")
    @patch("visual_helper.core.capture._run")
    @patch("visual_helper.core.capture.is_macos", return_value=True)
    def test_figma_window(self, mock_macos, mock_run, mock_sleep):
        mock_run.side_effect = ["", "4242", ""]
        result = capture_figma_window(self.captures)

        self.assertEqual(result.app, "Figma")
        self.assertTrue(result.filename.startswith("figma_"))
        mock_run.assert_called_with(["screencapture", "-x", "-l4242", result.filepath])

    @patch("visual_helper.core.capture.grab_primary_monitor", side_effect=fake_grab)
    @patch("visual_helper.core.capture.is_macos", return_value=False)
    def test_figma_falls_back_to_screen(self, mock_macos, mock_grab):
        result = capture_figma_window(self.captures)

        self.assertEqual(result.app, "Figma")
        self.assertEqual(result.method, "mss")
        self.assertTrue(result.filename.startswith("figma_"))

    @patch("visual_helper.core.capture.is_macos", return_value=False)
    def test_interactive_requires_macos(self, mock_macos):
        with self.assertRaises(CaptureError):
            capture_interactive(self.captures)

    @patch("visual_helper.core.capture._run")
    @patch("visual_helper.core.capture.is_macos", return_value=True)
    def test_interactive_cancelled(self, mock_macos, mock_run):
        # screencapture exits without writing a file
        with self.assertRaises(CaptureError):
            capture_interactive(self.captures)

    def test_unknown_target(self):
        with self.assertRaises(ValueError):
            capture("window", self.captures)

    @patch("visual_helper.core.capture._run", side_effect=FileNotFoundError("xdg-open"))
    @patch("visual_helper.core.capture.is_macos", return_value=False)
    def test_open_folder_is_best_effort(self, mock_macos, mock_run):
        self.assertFalse(open_folder(self.captures))


class TestImageProcessing(unittest.TestCase):
    """Test cases for image analysis and comparison"""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def _image(self, name, size, color, box=None, box_color=None):
        img = Image.new("RGB", size, color)
        if box:
            img.paste(box_color, box)
        path = os.path.join(self.temp_dir.name, name)
        img.save(path, format="PNG")
        return path

    def test_analyze_image(self):
        path = self._image("wide.png", (300, 100), (255, 0, 0))
        result = analyze_image(path)

        self.assertEqual(result["size"], os.path.getsize(path))
        self.assertEqual(result["analysis"]["width"], 300)
        self.assertEqual(result["analysis"]["height"], 100)
        self.assertEqual(result["analysis"]["layout"], "landscape")
        self.assertEqual(result["analysis"]["colors"][0], "#FF0000")

    def test_dominant_colors_most_frequent_first(self):
        img = Image.new("RGB", (100, 100), (0, 0, 255))
        img.paste((255, 255, 255), (0, 0, 100, 20))
        self.assertEqual(dominant_colors(img, 2), ["#0000FF", "#FFFFFF"])

    def test_resize_keeps_aspect_ratio(self):
        img = Image.new("RGB", (1000, 500))
        self.assertEqual(resize_image_if_needed(img, 100, 100).size, (100, 50))
        small = Image.new("RGB", (10, 10))
        self.assertIs(resize_image_if_needed(small, 100, 100), small)

    def test_compare_identical(self):
        a = self._image("a.png", (50, 50), (0, 128, 0))
        b = self._image("b.png", (50, 50), (0, 128, 0))
        result = compare_images(a, b)

        self.assertEqual(result["similarity"], 1.0)
        self.assertEqual(result["differences"], [])
        self.assertEqual(result["analysis"], "Images are identical")

    def test_compare_reports_changed_region(self):
        a = self._image("a.png", (100, 100), (255, 255, 255))
        b = self._image("b.png", (100, 100), (255, 255, 255), box=(10, 20, 30, 60), box_color=(0, 0, 0))
        result = compare_images(a, b)

        self.assertLess(result["similarity"], 1.0)
        self.assertEqual(result["differences"], [{"x": 10, "y": 20, "width": 20, "height": 40}])


class TestUtils(unittest.TestCase):
    """Test cases for core utilities"""

    def test_generate_filename(self):
        self.assertEqual(generate_filename("figma", "png", 1718000000000), "figma_1718000000000.png")

    def test_sanitize_name(self):
        self.assertEqual(sanitize_name("Hero / Desktop"), "Hero___Desktop")
        self.assertEqual(sanitize_name("Card-2"), "Card_2")

    def test_format_error_response(self):
        self.assertEqual(format_error_response("boom"), {"success": False, "error": "boom"})
        self.assertIn("system_info", format_error_response("boom", include_system_info=True))


if __name__ == "__main__":
    unittest.main()
