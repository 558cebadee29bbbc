"""Heading contrast: add or remove a CSS class on rendered heading tags"""

import re


HEADING_OPEN_RE = re.compile(r"<(h[1-6])(\s[^>]*)?>")
CLASS_ATTR_RE = re.compile(r'\sclass="([^"]*)"')


def _set_class(attrs: str, css_class: str, present: bool) -> str:
    """Return attrs with css_class added to or removed from its class attribute."""
    m = CLASS_ATTR_RE.search(attrs)
    classes = m.group(1).split() if m else []
    if present and css_class not in classes:
        classes.append(css_class)
    elif not present:
        classes = [c for c in classes if c != css_class]

    attrs = CLASS_ATTR_RE.sub("", attrs)
    if classes:
        attrs = f' class="{" ".join(classes)}"' + attrs
    return attrs


def _rewrite_headings(html: str, css_class: str, present: bool) -> str:
    return HEADING_OPEN_RE.sub(
        lambda m: f"<{m.group(1)}{_set_class(m.group(2) or '', css_class, present)}>",
        html,
    )


def apply_heading_contrast(html: str, css_class: str = "contrast-style") -> str:
    """Add css_class to every <h1>..<h6> opening tag; idempotent."""
    return _rewrite_headings(html, css_class, True)


def remove_heading_contrast(html: str, css_class: str = "contrast-style") -> str:
    """Remove css_class from every <h1>..<h6> opening tag; idempotent."""
    return _rewrite_headings(html, css_class, False)
