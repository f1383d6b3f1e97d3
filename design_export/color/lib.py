"""Hex color codec.

Decodes ``#RRGGBB`` strings into integer channels. Decoding is lenient:
anything that is not exactly six hex digits (optionally prefixed with ``#``)
decodes to black, so one bad color never aborts an export.
"""

import re
from typing import Any, NamedTuple

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


class RGB(NamedTuple):
    """Color channels in the 0-255 range."""

    r: int
    g: int
    b: int

    def normalized(self) -> tuple[float, float, float]:
        """Channels scaled to 0.0-1.0 (``channel / 255``)."""
        return (self.r / 255, self.g / 255, self.b / 255)


BLACK = RGB(0, 0, 0)


def hex_to_rgb(value: Any) -> RGB:
    """Decode a 6-digit hex color.

    Args:
        value: Color string such as ``"#3B82F6"`` or ``"3b82f6"``.

    Returns:
        RGB: Decoded channels, or ``RGB(0, 0, 0)`` for malformed input.

    Example:
        >>> hex_to_rgb("#3B82F6")
        RGB(r=59, g=130, b=246)
        >>> hex_to_rgb("blue")
        RGB(r=0, g=0, b=0)
    """
    if not isinstance(value, str):
        return BLACK

    match = _HEX_PATTERN.fullmatch(value)
    if match is None:
        return BLACK

    r, g, b = (int(group, 16) for group in match.groups())
    return RGB(r, g, b)


def is_valid_hex(value: Any) -> bool:
    """Check whether a value decodes without falling back to black."""
    return isinstance(value, str) and _HEX_PATTERN.fullmatch(value) is not None


__all__ = [
    "BLACK",
    "RGB",
    "hex_to_rgb",
    "is_valid_hex",
]
