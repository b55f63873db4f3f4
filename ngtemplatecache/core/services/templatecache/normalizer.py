"""
Content normalizer — turns a matched file into a TemplateEntry.

Decodes the bytes with the configured buffer encoding, escapes the text
for a single-quoted JavaScript string literal and derives the cache URI.
"""

from __future__ import annotations

from ngtemplatecache.core.models.options import Options
from ngtemplatecache.core.models.template import TemplateEntry, TemplateSource
from ngtemplatecache.core.services.templatecache.encoding import decode_contents

_JS_ESCAPES: dict[int, str] = {
    ord("\\"): "\\\\",
    ord("'"): "\\'",
    ord('"'): '\\"',
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}
# Remaining C0 controls and DEL; TAB is legal inside a literal
_JS_ESCAPES.update(
    {
        code: f"\\x{code:02x}"
        for code in (*range(0x20), 0x7F)
        if code not in _JS_ESCAPES and code != 0x09
    }
)


def escape_js_string(text: str) -> str:
    """Escape ``text`` for embedding between single quotes in JavaScript.

    Total over any str: characters that could end the literal or break
    the line are replaced by escape sequences, nothing is dropped.
    """
    return text.translate(_JS_ESCAPES)


def template_uri(filename: str, options: Options) -> str:
    """``transform_url(root + filename)``.

    ``root`` is prepended verbatim; no separator is inserted.  Errors
    raised by ``transform_url`` propagate to the caller.
    """
    return options.transform_url(options.root + filename)


def normalize(source: TemplateSource, options: Options) -> TemplateEntry:
    """Build the TemplateEntry for one matched file."""
    content = decode_contents(source.contents, options.buffer_encoding)
    return TemplateEntry(
        filename=source.filename,
        content=content,
        content_escaped=escape_js_string(content),
        uri=template_uri(source.filename, options),
    )
