"""
Before/After Hero Image

Renders a decorative hero image split in two: the left "Before" half shows the
palette as a muted, shuffled grid, the right "After" half shows the same
palette in order at full saturation.
"""

import random
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from loguru import logger
from PIL import Image, ImageDraw, ImageFont

from visual_helper.core.colors import ColorSwatch

RGB = Tuple[int, int, int]

DEFAULT_PALETTE: List[RGB] = [
    (0x1E, 0x3A, 0x8A), (0x25, 0x63, 0xEB), (0x60, 0xA5, 0xFA), (0x0E, 0xA5, 0xE9),
    (0x10, 0xB9, 0x81), (0x84, 0xCC, 0x16), (0xFA, 0xCC, 0x15), (0xF9, 0x73, 0x16),
    (0xEF, 0x44, 0x44), (0xEC, 0x48, 0x99), (0xA8, 0x55, 0xF7), (0x64, 0x74, 0x8B),
]

BACKGROUND: RGB = (17, 17, 17)
GUTTER = 8


def desaturate(color: RGB, amount: float = 0.8) -> RGB:
    """Blend a color towards its luminance grey."""
    r, g, b = color
    grey = 0.299 * r + 0.587 * g + 0.114 * b
    return tuple(int(round(c + (grey - c) * amount)) for c in (r, g, b))


def _palette(colors: Optional[Sequence[Union[ColorSwatch, RGB]]]) -> List[RGB]:
    if not colors:
        return list(DEFAULT_PALETTE)
    return [c.rgb255 if isinstance(c, ColorSwatch) else tuple(c) for c in colors]


def _draw_grid(
    draw: ImageDraw.ImageDraw,
    origin: Tuple[int, int],
    size: Tuple[int, int],
    cells: List[RGB],
    columns: int,
    rows: int,
) -> None:
    x0, y0 = origin
    width, height = size
    cell_w = (width - GUTTER * (columns + 1)) / columns
    cell_h = (height - GUTTER * (rows + 1)) / rows

    for index, color in enumerate(cells):
        row, col = divmod(index, columns)
        left = x0 + GUTTER + col * (cell_w + GUTTER)
        top = y0 + GUTTER + row * (cell_h + GUTTER)
        draw.rounded_rectangle((left, top, left + cell_w, top + cell_h), radius=6, fill=color)


def render_hero_image(
    colors: Optional[Sequence[Union[ColorSwatch, RGB]]],
    path: Union[str, Path],
    width: int = 1600,
    height: int = 900,
    columns: int = 8,
    rows: int = 6,
    seed: Optional[int] = None,
) -> Path:
    """
    Render the before/after color grid hero image.

    Args:
        colors: Palette as swatches or RGB tuples; the default palette when empty
        path: Output PNG path
        width: Image width in pixels
        height: Image height in pixels
        columns: Grid columns per half
        rows: Grid rows
        seed: Seed for the "before" shuffle, for reproducible output

    Returns:
        Path: The written file
    """
    if columns < 1 or rows < 1:
        raise ValueError(f"Grid needs at least one column and row, got {columns}x{rows}")

    palette = _palette(colors)
    count = columns * rows
    after = [palette[i % len(palette)] for i in range(count)]
    before = [desaturate(c) for c in after]
    random.Random(seed).shuffle(before)

    img = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(img)
    label_h = 48
    half = width // 2
    font = ImageFont.load_default(size=24)

    _draw_grid(draw, (0, label_h), (half, height - label_h), before, columns, rows)
    _draw_grid(draw, (half, label_h), (width - half, height - label_h), after, columns, rows)

    draw.text((GUTTER * 2, 12), "Before", fill=(160, 160, 160), font=font)
    draw.text((half + GUTTER * 2, 12), "After", fill=(255, 255, 255), font=font)
    draw.line((half, 0, half, height), fill=(255, 255, 255), width=2)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, format="PNG")
    logger.info(f"Rendered {width}x{height} hero image with {len(palette)} colors to {path}")
    return path
