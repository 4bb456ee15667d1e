#!/usr/bin/env python3
"""
Color Showcase Builder

This module turns a document snapshot into a color showcase: a framed card
grid with one card per color, placed on the canvas where it does not cover
existing content. The layout is plain data so the design plugin can recreate
it node by node; render_showcase draws the same layout into a PNG preview.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- build_showcase(load_snapshot("snapshot.json"))

Expected output:
- ShowcaseLayout with the frame at the chosen placement, a header, and a
  card per extracted color laid out four to a row
"""

import math
from pathlib import Path
from typing import List, Mapping, Any, Optional, Tuple, Union

from loguru import logger
from PIL import Image, ImageDraw, ImageFont
from pydantic import BaseModel, Field

from visual_helper.core.colors import ColorSource, ColorSwatch, extract_showcase_colors, truncate_label
from visual_helper.core.constants import PLACEMENT_SETTINGS, SHOWCASE_LAYOUT
from visual_helper.core.document import DocumentAnalysis, get_current_page, scan_document
from visual_helper.core.geometry import Rect
from visual_helper.core.placement import PlacementResult, collect_occupied_regions, find_clear_space

NO_LIBRARY_NOTE = "No library colors loaded. Showing document colors:"
HELP_TIP = (
    "Tip: To load DS19 colors:\n"
    "1. Open Assets panel (left sidebar)\n"
    "2. Find DS19 library\n"
    "3. Use a color from DS19 in your design\n"
    "4. Re-run this plugin"
)


class ShowcaseText(BaseModel):
    """A text block inside the showcase frame."""

    text: str
    rect: Rect
    font_size: int
    color: Tuple[float, float, float] = (0.1, 0.1, 0.1)


class ShowcaseCard(BaseModel):
    """A color card: swatch on top, label and hex value below."""

    swatch: ColorSwatch
    rect: Rect
    label: str
    hex: str


class ShowcaseLayout(BaseModel):
    """Complete showcase layout in canvas coordinates."""

    placement: PlacementResult
    frame: Rect
    title: ShowcaseText
    subtitle: ShowcaseText
    divider: Rect
    grid: Rect
    cards: List[ShowcaseCard] = Field(default_factory=list)
    notes: List[ShowcaseText] = Field(default_factory=list)
    analysis: Optional[DocumentAnalysis] = None

    @property
    def color_count(self) -> int:
        return len(self.cards)


def _line_height(font_size: int) -> int:
    return int(round(font_size * 1.4))


def cards_per_row(
    content_width: float = SHOWCASE_LAYOUT["CONTENT_WIDTH"],
    card_width: float = SHOWCASE_LAYOUT["CARD_WIDTH"],
    spacing: float = SHOWCASE_LAYOUT["CARD_SPACING"],
) -> int:
    """Number of cards that fit in one wrapped row."""
    return max(1, int((content_width + spacing) // (card_width + spacing)))


def layout_cards(swatches: List[ColorSwatch], origin_x: float, origin_y: float) -> Tuple[List[ShowcaseCard], float]:
    """
    Lay cards out left to right, wrapping at the content width.

    Returns:
        Tuple[List[ShowcaseCard], float]: The cards and the grid height
    """
    card_w = SHOWCASE_LAYOUT["CARD_WIDTH"]
    card_h = SHOWCASE_LAYOUT["CARD_HEIGHT"]
    spacing = SHOWCASE_LAYOUT["CARD_SPACING"]
    per_row = cards_per_row()

    cards = []
    for index, swatch in enumerate(swatches):
        row, col = divmod(index, per_row)
        cards.append(ShowcaseCard(
            swatch=swatch,
            rect=Rect(
                x=origin_x + col * (card_w + spacing),
                y=origin_y + row * (card_h + spacing),
                width=card_w,
                height=card_h,
            ),
            label=truncate_label(swatch.display_name),
            hex=swatch.hex,
        ))

    rows = math.ceil(len(swatches) / per_row)
    height = rows * card_h + max(0, rows - 1) * spacing
    return cards, height


def build_showcase(
    snapshot: Mapping[str, Any],
    padding: float = PLACEMENT_SETTINGS["DEFAULT_PADDING"],
) -> ShowcaseLayout:
    """
    Build the color showcase for a document snapshot.

    Args:
        snapshot: Document snapshot
        padding: Clearance between the showcase and existing content

    Returns:
        ShowcaseLayout: Frame, header, cards and notes in canvas coordinates
    """
    analysis = scan_document(snapshot)
    swatches = extract_showcase_colors(snapshot)

    est_width, est_height = SHOWCASE_LAYOUT["ESTIMATED_SIZE"]
    regions = collect_occupied_regions(get_current_page(snapshot).get("children") or [])
    placement = find_clear_space(est_width, est_height, regions, padding=padding)
    logger.info(f"Placing color showcase at x:{placement.x}, y:{placement.y} ({placement.zone.value})")

    frame_pad = SHOWCASE_LAYOUT["FRAME_PADDING"]
    spacing = SHOWCASE_LAYOUT["ITEM_SPACING"]
    content_w = SHOWCASE_LAYOUT["CONTENT_WIDTH"]
    left = placement.x + frame_pad
    cursor = placement.y + frame_pad

    title = ShowcaseText(
        text=SHOWCASE_LAYOUT["TITLE"],
        rect=Rect(x=left, y=cursor, width=content_w, height=_line_height(32)),
        font_size=32,
    )
    subtitle = ShowcaseText(
        text=f"Displaying {len(swatches)} colors from your design system",
        rect=Rect(x=left, y=cursor + title.rect.height + 8, width=content_w, height=_line_height(14)),
        font_size=14,
        color=(0.4, 0.4, 0.4),
    )
    cursor += SHOWCASE_LAYOUT["HEADER_HEIGHT"] + spacing

    divider = Rect(x=left, y=cursor, width=content_w, height=SHOWCASE_LAYOUT["DIVIDER_HEIGHT"])
    cursor += divider.height + spacing

    cards, grid_height = layout_cards(swatches, left, cursor)
    grid = Rect(x=left, y=cursor, width=content_w, height=grid_height)
    cursor += grid_height

    notes = []
    note_texts = []
    if swatches and swatches[0].source == ColorSource.DOCUMENT:
        note_texts.append((NO_LIBRARY_NOTE, 14, (0.5, 0.5, 0.5)))
    if not snapshot.get("paintStyles") and not snapshot.get("variables"):
        note_texts.append((HELP_TIP, 12, (0.3, 0.3, 0.3)))

    for text, size, color in note_texts:
        cursor += spacing
        height = _line_height(size) * (text.count("\n") + 1)
        notes.append(ShowcaseText(
            text=text,
            rect=Rect(x=left, y=cursor, width=content_w, height=height),
            font_size=size,
            color=color,
        ))
        cursor += height

    frame = Rect(
        x=placement.x,
        y=placement.y,
        width=content_w + 2 * frame_pad,
        height=cursor + frame_pad - placement.y,
    )

    return ShowcaseLayout(
        placement=placement,
        frame=frame,
        title=title,
        subtitle=subtitle,
        divider=divider,
        grid=grid,
        cards=cards,
        notes=notes,
        analysis=analysis,
    )


def _rgb(color: Tuple[float, float, float]) -> Tuple[int, int, int]:
    return tuple(int(round(c * 255)) for c in color)


def _font(size: int) -> ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


def render_showcase(layout: ShowcaseLayout, path: Union[str, Path]) -> Path:
    """
    Render a showcase layout to a PNG file.

    Args:
        layout: Layout produced by build_showcase
        path: Output PNG path

    Returns:
        Path: The written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    frame = layout.frame
    ox, oy = frame.x, frame.y
    img = Image.new("RGBA", (int(math.ceil(frame.width)), int(math.ceil(frame.height))), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    def box(rect: Rect) -> Tuple[float, float, float, float]:
        return (rect.x - ox, rect.y - oy, rect.right - ox - 1, rect.bottom - oy - 1)

    draw.rounded_rectangle((0, 0, img.width - 1, img.height - 1), radius=16, fill=(255, 255, 255, 255))

    for text in (layout.title, layout.subtitle, *layout.notes):
        draw.multiline_text(box(text.rect)[:2], text.text, fill=_rgb(text.color), font=_font(text.font_size))

    draw.rectangle(box(layout.divider), fill=(230, 230, 230))

    swatch_h = SHOWCASE_LAYOUT["SWATCH_HEIGHT"]
    card_pad = SHOWCASE_LAYOUT["CARD_PADDING"]
    label_font = _font(12)
    hex_font = _font(11)

    for card in layout.cards:
        x0, y0, x1, y1 = box(card.rect)
        draw.rounded_rectangle((x0, y0, x1, y1), radius=12, fill=(255, 255, 255), outline=(235, 235, 235))
        draw.rectangle((x0, y0, x1, y0 + swatch_h - 1), fill=card.swatch.rgb255)
        draw.text((x0 + card_pad, y0 + swatch_h + card_pad), card.label, fill=(26, 26, 26), font=label_font)
        draw.text((x0 + card_pad, y0 + swatch_h + card_pad + 18), card.hex, fill=(128, 128, 128), font=hex_font)

    img.save(path, format="PNG")
    logger.info(f"Rendered showcase with {layout.color_count} colors to {path}")
    return path
