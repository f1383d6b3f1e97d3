"""Unit tests for HTML escaping."""

import pytest

from design_export.markup import escape_html


class TestEscapeHtml:
    """Tests for escape_html."""

    @pytest.mark.unit
    def test_script_tag_is_neutralized(self):
        """No literal angle brackets survive."""
        escaped = escape_html('<script>alert("x")</script>')
        assert "<" not in escaped
        assert ">" not in escaped
        assert escaped == "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;"

    @pytest.mark.unit
    def test_safe_text_is_unchanged(self):
        """Strings without special characters pass through untouched."""
        text = "Welcome to our website 123"
        assert escape_html(text) == text

    @pytest.mark.unit
    def test_all_five_entities(self):
        assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&#039;"

    @pytest.mark.unit
    def test_no_double_escaping(self):
        """Ampersands from other substitutions are not escaped again."""
        assert escape_html("<") == "&lt;"
        assert escape_html("&lt;") == "&amp;lt;"

    @pytest.mark.unit
    def test_empty_string(self):
        assert escape_html("") == ""
