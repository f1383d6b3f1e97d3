"""HTML escaping for user-authored text embedded in markup."""

import re

_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}

_SPECIAL_CHARS = re.compile(r"[&<>\"']")


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters.

    Substitution happens in a single pass, so the ampersands introduced by
    one entity are never escaped again.

    Args:
        text: Raw user text.

    Returns:
        str: Text safe to embed in element content or quoted attributes.

    Example:
        >>> escape_html('<a href="x">Tom & Jerry</a>')
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&lt;/a&gt;'
    """
    return _SPECIAL_CHARS.sub(lambda match: _ENTITIES[match.group(0)], str(text))


__all__ = ["escape_html"]
