"""
Tests for domain models — files, template entries, generated output.
"""

import pytest
from pydantic import ValidationError

from ngtemplatecache.core.models import (
    GeneratedFile,
    TemplateEntry,
    TemplateSource,
    VirtualFile,
)


class TestVirtualFile:
    def test_defaults(self):
        f = VirtualFile()
        assert f.contents == b""
        assert f.mode is None
        assert f.metadata == {}

    def test_metadata_is_mutable(self):
        f = VirtualFile(contents=b"x")
        f.metadata["title"] = "Home"
        f.mode = "0600"
        assert f.metadata == {"title": "Home"}
        assert f.mode == "0600"


class TestTemplateEntry:
    def test_alias_and_name(self):
        a = TemplateEntry(filename="a", content="c", contentEscaped="e", uri="u")
        b = TemplateEntry(filename="a", content="c", content_escaped="e", uri="u")
        assert a == b

    def test_frozen(self):
        e = TemplateEntry(filename="a", content="c", content_escaped="e", uri="u")
        with pytest.raises(ValidationError):
            e.uri = "other"

    def test_uri_must_be_text(self):
        with pytest.raises(ValidationError):
            TemplateEntry(filename="a", content="c", content_escaped="e", uri=None)


class TestTemplateSource:
    def test_snapshot_keeps_bytes(self):
        s = TemplateSource(filename="a.html", contents=b"\x00\xff")
        assert s.contents == b"\x00\xff"


class TestGeneratedFile:
    def test_fields(self):
        g = GeneratedFile(path="templates.js", content="x", reason="why")
        assert g.model_dump() == {"path": "templates.js", "content": "x", "reason": "why"}
