"""
Template models — the values flowing through one build pass.

    TemplateSource  snapshot of a matched file, captured by the selector
    TemplateEntry   decoded + escaped file with its cache URI
    GeneratedFile   the assembled loader, written by the emitter
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TemplateSource(BaseModel):
    """A matched source file, detached from the host collection."""

    model_config = ConfigDict(frozen=True)

    filename: str
    contents: bytes


class TemplateEntry(BaseModel):
    """A template ready to be rendered into the body of the loader.

    Attributes:
        filename:        Original key in the file collection.
        content:         Decoded text of the file.
        content_escaped: ``content`` made safe for a single-quoted JS string.
        uri:             ``transform_url(root + filename)``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    filename: str
    content: str
    content_escaped: str = Field(alias="contentEscaped")
    uri: str

    def template_context(self) -> dict[str, Any]:
        """Rendering context for the body template (both name spellings)."""
        context = self.model_dump()
        context.update(self.model_dump(by_alias=True))
        return context


class GeneratedFile(BaseModel):
    """The file produced by a build pass.

    Attributes:
        path:    Destination key in the file collection.
        content: Full generated source text.
        reason:  Why this file was generated.
    """

    path: str
    content: str
    reason: str = ""
