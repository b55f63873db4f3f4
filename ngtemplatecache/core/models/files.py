"""
Virtual file model — one entry of the host's in-memory file collection.

The host build tool owns the collection (a mutable ``path → VirtualFile``
mapping with forward-slash keys).  This package reads entries, deletes
consumed ones and adds the generated loader.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from pydantic import BaseModel, Field


class VirtualFile(BaseModel):
    """A file held in memory by the build host.

    Attributes:
        contents: Raw bytes of the file.
        mode:     Permission string such as ``"0644"`` (None = host default).
        metadata: Free-form host metadata (front matter, stats, ...).
    """

    contents: bytes = b""
    mode: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


FileCollection = MutableMapping[str, "VirtualFile | None"]
