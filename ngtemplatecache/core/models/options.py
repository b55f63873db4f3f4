"""
Options model — the resolved configuration of a template cache build.

Field names are snake_case; every field also answers to the camelCase
alias used in build configuration files (``bufferEncoding``,
``removeSource``, ...).  Instances are frozen: the options are resolved
once when the plugin is constructed and only read afterwards.

Validation never rejects a value.  Text fields take any scalar and
stringify it the way JavaScript string concatenation would (``7`` →
``"7"``, ``True`` → ``"true"``), so build configurations shared with
JavaScript tooling produce the same output.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ngtemplatecache.adapters.base import UrlTransform

DEFAULT_TEMPLATE_HEADER = (
    "angular.module('{{{module}}}'{{#standalone}},[]{{/standalone}})"
    ".run(['$templateCache',function($templateCache){\n"
)
DEFAULT_TEMPLATE_BODY = "$templateCache.put('{{{uri}}}','{{{contentEscaped}}}');\n"
DEFAULT_TEMPLATE_FOOTER = "}]);\n"

_TEXT_FIELDS = (
    "buffer_encoding",
    "destination",
    "match",
    "module",
    "root",
    "template_body",
    "template_footer",
    "template_header",
)


def identity_url(url: str) -> str:
    """Default ``transform_url``: return the URI unchanged."""
    return url


def js_string(value: Any) -> str:
    """Stringify ``value`` as JavaScript's ``String()`` would."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else js_string(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


class Options(BaseModel):
    """Fully resolved plugin options.  Every field has a concrete value."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    buffer_encoding: str = Field(default="utf8", alias="bufferEncoding")
    destination: str = "templates.js"
    destination_mode: str = Field(default="0644", alias="destinationMode")
    match: str = "**/*.html"
    match_options: dict[str, Any] = Field(default_factory=dict, alias="matchOptions")
    module: str = "templates"
    module_system: str | None = Field(default=None, alias="moduleSystem")
    remove_source: bool = Field(default=True, alias="removeSource")
    root: str = ""
    standalone: bool = False
    template_body: str = Field(default=DEFAULT_TEMPLATE_BODY, alias="templateBody")
    template_footer: str = Field(default=DEFAULT_TEMPLATE_FOOTER, alias="templateFooter")
    template_header: str = Field(default=DEFAULT_TEMPLATE_HEADER, alias="templateHeader")
    transform_url: UrlTransform = Field(default=identity_url, alias="transformUrl")

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return js_string(value)

    @field_validator("remove_source", "standalone", mode="before")
    @classmethod
    def _truthiness(cls, value: Any) -> bool:
        # "no" and "false" are truthy strings and stay True
        return bool(value)

    @field_validator("destination_mode", mode="before")
    @classmethod
    def _octal_mode(cls, value: Any) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            return f"{value:04o}"
        return js_string(value)

    @field_validator("match_options", mode="before")
    @classmethod
    def _mapping_or_empty(cls, value: Any) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            return {}
        return {js_string(key): item for key, item in value.items()}

    @field_validator("module_system", mode="before")
    @classmethod
    def _falsy_means_none(cls, value: Any) -> str | None:
        return js_string(value) if value else None

    @field_validator("transform_url", mode="before")
    @classmethod
    def _callable_or_identity(cls, value: Any) -> UrlTransform:
        return value if callable(value) else identity_url

    def template_context(self) -> dict[str, Any]:
        """Rendering context for the header and footer templates.

        Exposes every field under both its snake_case name and its
        camelCase alias so user templates may use either spelling.
        """
        context = self.model_dump(exclude={"transform_url"})
        context.update(self.model_dump(by_alias=True, exclude={"transform_url"}))
        return context
