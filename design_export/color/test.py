"""Unit tests for the hex color codec."""

import pytest

from design_export.color import RGB, hex_to_rgb, is_valid_hex


class TestHexToRgb:
    """Tests for hex_to_rgb decoding."""

    @pytest.mark.unit
    def test_decodes_with_hash(self):
        """Hash-prefixed hex decodes to exact channels."""
        assert hex_to_rgb("#3B82F6") == RGB(59, 130, 246)

    @pytest.mark.unit
    def test_decodes_without_hash(self):
        """The leading hash is optional."""
        assert hex_to_rgb("3B82F6") == RGB(59, 130, 246)

    @pytest.mark.unit
    def test_case_insensitive(self):
        """Lower and upper case digits decode identically."""
        assert hex_to_rgb("#ffffff") == hex_to_rgb("#FFFFFF") == RGB(255, 255, 255)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        [
            "",
            "#",
            "#FFF",
            "#FFFFFFF",
            "#GGGGGG",
            "blue",
            "##FFFFFF",
            "#FFFFFF\n",
            " #FFFFFF",
            "rgb(1,2,3)",
            None,
            123456,
        ],
    )
    def test_malformed_input_is_black(self, value):
        """Any malformed input falls back to black instead of raising."""
        assert hex_to_rgb(value) == RGB(0, 0, 0)

    @pytest.mark.unit
    def test_channels_always_in_range(self):
        """Decoded channels stay within 0-255."""
        for value in ("#000000", "#FFFFFF", "#7F7F7F", "nonsense"):
            rgb = hex_to_rgb(value)
            assert all(0 <= channel <= 255 for channel in rgb)

    @pytest.mark.unit
    def test_normalized_channels(self):
        """normalized() divides each channel by 255."""
        r, g, b = hex_to_rgb("#FF0033").normalized()
        assert r == 1.0
        assert g == 0.0
        assert b == pytest.approx(0.2)


class TestIsValidHex:
    """Tests for is_valid_hex."""

    @pytest.mark.unit
    def test_valid(self):
        assert is_valid_hex("#10B981")
        assert is_valid_hex("10b981")

    @pytest.mark.unit
    def test_invalid(self):
        assert not is_valid_hex("#10B98")
        assert not is_valid_hex(None)
        assert not is_valid_hex("transparent")
