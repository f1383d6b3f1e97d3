"""Hex color decoding for export formats."""

from design_export.color.lib import RGB, hex_to_rgb, is_valid_hex

__all__ = [
    "RGB",
    "hex_to_rgb",
    "is_valid_hex",
]
