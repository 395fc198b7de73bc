"""Deterministic procedural colour image generator."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

from PIL import Image

_MASK32 = 0xFFFFFFFF
_SPAN = 1024.0


def _rotate_left32(value: int, amount: int) -> int:
    value &= _MASK32
    amount %= 32
    return ((value << amount) | (value >> (32 - amount))) & _MASK32


def _to_u8(value: float) -> int:
    """Truncate towards zero and saturate into 0..255; NaN becomes 0."""
    if math.isnan(value):
        return 0
    return max(0, min(255, int(value)))


def _fract(value: float) -> float:
    return math.modf(value)[0]


def generate_color_value(x: int, y: int, channel: int) -> int:
    """Return a colour component (0..255) for position (x, y) and a channel."""
    nx = (x / _SPAN) * 6.28
    ny = (y / _SPAN) * 6.28

    seed = ((x ^ _rotate_left32(y, channel * 7)) & 0xFF) / 255.0

    cx = nx + seed * 3.0
    cy = ny - seed * 3.0
    for _ in range(3):
        cx, cy = (
            math.sin(cx) * math.cos(cy) + seed * 1.7,
            math.sin(cy) * math.cos(cx) - seed * 1.3,
        )

    raw = math.sin(cx * cy * 10.0 + seed * 5.0)

    if channel == 0:
        return _to_u8(raw * 127.0 + 128.0)
    if channel == 1:
        return _to_u8(_fract(raw + seed) * 255.0)
    if channel == 2:
        return _to_u8(_fract(abs(raw * seed * 3.14)) * 255.0)
    return 0


def _pixel(x: int, y: int) -> tuple[int, int, int]:
    return (
        generate_color_value(x, y, 0),
        generate_color_value(x + 3, y + 11, 1),
        generate_color_value(x + 17, y + 7, 2),
    )


def generate_image(width: int, height: int) -> Image.Image:
    """Build an RGB image of the given size from the colour generator."""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    image = Image.new("RGB", (width, height))
    image.putdata([_pixel(x, y) for y in range(height) for x in range(width)])
    return image


def main(argv: Sequence[str] | None = None) -> int:
    """Render the generated image and save it to a file."""
    parser = argparse.ArgumentParser(description="Generate a procedural colour image.")
    parser.add_argument("--output", "-o", default="output.png", help="file to write")
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=1024)
    args = parser.parse_args(argv)

    generate_image(args.width, args.height).save(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())