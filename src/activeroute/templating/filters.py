"""Template filters for composing active classes.

Matchers return ``""`` when inactive, so these filters drop empty
values instead of emitting ``class=""`` or stray whitespace.
"""

import html
from typing import Any

from kida.template import Markup


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <a href="/users"{{ active_pattern("users*") | attr("class") }}>Users</a>
        → <a href="/users" class="active">Users</a>   (on users/42)
        → <a href="/users">Users</a>                  (elsewhere)

    Blank and whitespace-only values count as inactive.
    """
    text = str(value).strip() if value else ""
    if not text:
        return ""
    return Markup(f' {name}="{html.escape(text, quote=True)}"')


def classes(base: str, *extra: str) -> str:
    """Join class names, skipping empty ones.

    Example:
        class="{{ "nav-link" | classes(active_route("home")) }}"
        → "nav-link active"   (on the home route)
        → "nav-link"          (elsewhere)

    """
    return " ".join(c for c in (base, *extra) if c)


# All activeroute filters, registered by install_globals().
BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "classes": classes,
}
