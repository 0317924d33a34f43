"""
Geometry primitives: points and hex color handling.
"""
import re
from dataclasses import dataclass
from typing import Tuple

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Point:
    """A point in either viewport or document space."""
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def normalize_hex_color(value: str) -> str:
    """
    Return a color in canonical ``#RRGGBB`` form.

    Args:
        value: Hex color with or without a leading '#', 3 or 6 digits

    Returns:
        Upper-case ``#RRGGBB`` string

    Raises:
        ValueError: If the value is not a hex color
    """
    if not isinstance(value, str):
        raise ValueError(f"Color must be a string, got {type(value).__name__}")

    match = _HEX_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits.upper()}"


def hex_to_rgb(value: str) -> Tuple[float, float, float]:
    """
    Convert a hex color to normalized RGB channels.

    Args:
        value: Hex color string

    Returns:
        (r, g, b) tuple with each channel in [0, 1]
    """
    digits = normalize_hex_color(value)[1:]
    return tuple(int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
