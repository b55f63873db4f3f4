"""
Template assembler — renders the loader source.

    header (options)  +  body (entry) for each template  +  footer (options)

The default templates interpolate with triple braces: content arrives
already escaped for JavaScript and must not be HTML-entity encoded.
"""

from __future__ import annotations

from collections.abc import Sequence

from ngtemplatecache.adapters.base import Renderer
from ngtemplatecache.core.models.options import Options
from ngtemplatecache.core.models.template import TemplateEntry


def assemble(entries: Sequence[TemplateEntry], options: Options, renderer: Renderer) -> str:
    """Render the complete, unwrapped loader text."""
    context = options.template_context()

    parts = [renderer.render(options.template_header, context)]
    for entry in sorted(entries, key=lambda e: e.filename):
        parts.append(renderer.render(options.template_body, entry.template_context()))
    parts.append(renderer.render(options.template_footer, context))

    return "".join(parts)
