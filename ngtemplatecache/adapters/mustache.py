"""
Mustache renderer — the template engine behind header, body, footer
and module wrappers.

``{{name}}`` HTML-escapes, ``{{{name}}}`` inserts raw text and
``{{#flag}}...{{/flag}}`` renders only when ``flag`` is truthy.

Booleans interpolate as ``true``/``false`` so user templates emit
JavaScript literals.  ``{{name}}`` escapes ``& < > "`` only; quotes,
``/``, backtick and ``=`` pass through unchanged.  Interpolate with
triple braces whenever the exact bytes matter.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import chevron

from ngtemplatecache.adapters.base import Renderer


class _JsBool:
    """Boolean that keeps its truthiness for sections but prints like JS."""

    # Makes chevron hand back the object itself even when it is falsy
    _CHEVRON_return_scope_when_falsy = True

    def __init__(self, value: bool):
        self._value = value

    def __bool__(self) -> bool:
        return self._value

    def __str__(self) -> str:
        return "true" if self._value else "false"


def _js_values(value: Any) -> Any:
    if isinstance(value, bool):
        return _JsBool(value)
    if isinstance(value, Mapping):
        return {key: _js_values(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_js_values(item) for item in value]
    return value


class MustacheRenderer(Renderer):
    """Renders templates with chevron.  Partials are not supported."""

    def render(self, template: str, context: Mapping[str, Any]) -> str:
        return chevron.render(template, _js_values(context))
