"""HTML escaping for values interpolated into markup."""

# Ampersand must come first so later entities are not escaped twice
_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: str) -> str:
    """Replace the five HTML-special characters with their entities."""
    for char, entity in _REPLACEMENTS:
        text = text.replace(char, entity)
    return text
