"""
Debug Utilities

Saves rendered solver displays as images and manages debug output.
"""

from datetime import datetime
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw


# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Rendering settings
PIXEL_SIZE = 8
LIT_CHARS = "#"
LIT_COLOR = (255, 204, 0)
DARK_COLOR = (15, 15, 35)


def render_display(lines: Sequence[str], pixel_size: int = PIXEL_SIZE) -> Image.Image:
    """
    Draw a text display as a block image.

    Each character becomes a square of pixel_size pixels, lit for '#' and
    dark otherwise.

    Args:
        lines: Rendered rows of the display
        pixel_size: Edge length of one character cell in pixels

    Returns:
        RGB PIL Image
    """
    width = max((len(line) for line in lines), default=0)
    image = Image.new("RGB", (max(width, 1) * pixel_size, max(len(lines), 1) * pixel_size), DARK_COLOR)
    draw = ImageDraw.Draw(image)

    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char in LIT_CHARS:
                left, top = x * pixel_size, y * pixel_size
                draw.rectangle(
                    [left, top, left + pixel_size - 1, top + pixel_size - 1],
                    fill=LIT_COLOR,
                )

    return image


def save_display_image(lines: Sequence[str], label: str) -> Path:
    """
    Save a rendered display to the debug directory.

    Args:
        lines: Rendered rows of the display
        label: Short name included in the file name, e.g. "day10b"

    Returns:
        Path of the saved PNG
    """
    DEBUG_DIR.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
    path = DEBUG_DIR / f"debug_{label}_{timestamp}.png"
    render_display(lines).save(path, "PNG")

    _cleanup_debug_images()
    return path


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        old_file.unlink(missing_ok=True)
