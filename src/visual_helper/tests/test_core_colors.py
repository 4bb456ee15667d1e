#!/usr/bin/env python3
"""
Unit tests for core/colors.py
"""

import unittest

from visual_helper.core.colors import (
    ColorSource,
    ColorSwatch,
    color_key,
    extract_showcase_colors,
    rgb_to_hex,
    truncate_label,
)

BLUE = {"r": 0, "g": 0.4, "b": 1}

SNAPSHOT = {
    "document": {"children": [{"type": "PAGE", "children": []}]},
    "paintStyles": [
        {"name": "Primary", "key": "lib-key", "paints": [{"type": "SOLID", "color": BLUE}]},
        {"name": "Gradient", "paints": [{"type": "GRADIENT_LINEAR"}]},
        {"name": "Primary Copy", "paints": [{"type": "SOLID", "color": {"r": 0, "g": 0.4001, "b": 1}}]},
        {"name": "Local Grey", "paints": [{"type": "SOLID", "color": {"r": 0.5, "g": 0.5, "b": 0.5}}]},
        {"paints": [{"type": "SOLID", "color": {"r": 0.9, "g": 0.9, "b": 0.9}}]},
    ],
    "variables": [
        {
            "name": "Accent",
            "resolvedType": "COLOR",
            "variableCollectionId": "col-1",
            "valuesByMode": {"dark": {"r": 0, "g": 1, "b": 0, "a": 1}, "light": {"r": 1, "g": 0, "b": 0, "a": 1}},
        },
        {"name": "Spacing", "resolvedType": "FLOAT", "variableCollectionId": "col-1", "valuesByMode": {"light": 8}},
        {"name": "Brand", "resolvedType": "COLOR", "variableCollectionId": "col-1", "valuesByMode": {"light": BLUE}},
        {"name": "Orphan", "resolvedType": "COLOR", "variableCollectionId": "missing", "valuesByMode": {}},
    ],
    "variableCollections": {"col-1": {"name": "Theme", "defaultModeId": "light"}},
}


class TestColorHelpers(unittest.TestCase):
    """Test cases for color conversions"""

    def test_rgb_to_hex_rounds_half_up(self):
        self.assertEqual(rgb_to_hex({"r": 1, "g": 0.5, "b": 0}), "#FF8000")
        self.assertEqual(rgb_to_hex({"r": 0, "g": 0, "b": 0}), "#000000")
        self.assertEqual(rgb_to_hex({"r": 1, "g": 1, "b": 1}), "#FFFFFF")

    def test_color_key(self):
        self.assertEqual(color_key({"r": 0.1234, "g": 0, "b": 1}), "0.123-0.000-1.000")

    def test_truncate_label(self):
        self.assertEqual(truncate_label("A" * 22), "A" * 22)
        self.assertEqual(truncate_label("A" * 23), "A" * 22 + "...")
        self.assertEqual(truncate_label("Brand / Primary", limit=5), "Brand...")

    def test_swatch_properties(self):
        swatch = ColorSwatch(name="Primary", r=1, g=0.5, b=0, is_library=True)
        self.assertEqual(swatch.hex, "#FF8000")
        self.assertEqual(swatch.rgb255, (255, 128, 0))
        self.assertEqual(swatch.display_name, "📚 Primary")
        self.assertEqual(ColorSwatch(name="Local", r=0, g=0, b=0).display_name, "Local")


class TestExtractShowcaseColors(unittest.TestCase):
    """Test cases for gathering showcase colors"""

    def test_styles_then_variables_deduplicated(self):
        swatches = extract_showcase_colors(SNAPSHOT)
        self.assertEqual([s.name for s in swatches], ["Primary", "Local Grey", "Accent"])

    def test_sources_and_library_flag(self):
        primary, grey, accent = extract_showcase_colors(SNAPSHOT)
        self.assertEqual(primary.source, ColorSource.STYLE)
        self.assertTrue(primary.is_library)
        self.assertFalse(grey.is_library)
        self.assertEqual(accent.source, ColorSource.VARIABLE)

    def test_variable_uses_default_mode(self):
        accent = extract_showcase_colors(SNAPSHOT)[-1]
        self.assertEqual(accent.hex, "#FF0000")

    def test_falls_back_to_document_fills(self):
        snapshot = {
            "children": [
                {"name": "Card", "fills": [{"type": "SOLID", "color": BLUE}]},
                {
                    "name": "Group",
                    "fills": [{"type": "SOLID", "visible": False, "color": {"r": 0, "g": 1, "b": 0}}],
                    "children": [
                        {"name": "Card Copy", "fills": [{"type": "SOLID", "color": BLUE}]},
                        {"name": "", "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 0}}]},
                    ],
                },
            ]
        }
        swatches = extract_showcase_colors(snapshot)

        self.assertEqual([s.name for s in swatches], ["Card", "Document Color"])
        self.assertTrue(all(s.source == ColorSource.DOCUMENT for s in swatches))

    def test_document_fill_without_color_is_skipped(self):
        snapshot = {"children": [
            {"name": "Broken", "fills": [{"type": "SOLID"}]},
            {"name": "Card", "fills": [{"type": "SOLID", "color": BLUE}]},
        ]}
        self.assertEqual([s.name for s in extract_showcase_colors(snapshot)], ["Card"])

    def test_empty_everything(self):
        self.assertEqual(extract_showcase_colors({"children": []}), [])


if __name__ == "__main__":
    unittest.main()
