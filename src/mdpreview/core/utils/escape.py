"""HTML escaping for preview text and code block content"""


# Ampersand must stay first so later entities are not double-escaped.
HTML_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters of text."""
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text
