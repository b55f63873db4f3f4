"""
Domain models — Pydantic types for the template cache pipeline.

All models are re-exported here for convenient access:

    from ngtemplatecache.core.models import Options, VirtualFile, TemplateEntry
"""

from ngtemplatecache.core.models.files import FileCollection, VirtualFile
from ngtemplatecache.core.models.options import (
    DEFAULT_TEMPLATE_BODY,
    DEFAULT_TEMPLATE_FOOTER,
    DEFAULT_TEMPLATE_HEADER,
    Options,
    identity_url,
)
from ngtemplatecache.core.models.template import (
    GeneratedFile,
    TemplateEntry,
    TemplateSource,
)

__all__ = [
    # options.py
    "DEFAULT_TEMPLATE_BODY",
    "DEFAULT_TEMPLATE_FOOTER",
    "DEFAULT_TEMPLATE_HEADER",
    # files.py
    "FileCollection",
    # template.py
    "GeneratedFile",
    "Options",
    "TemplateEntry",
    "TemplateSource",
    "VirtualFile",
    "identity_url",
]
