"""
Adapter base — the capability contracts the pipeline depends on.

The pipeline never talks to a glob engine or a template engine
directly.  It goes through these two interfaces, which keeps the
transform testable with fakes and lets a host swap the engines.

The URL transform supplied in the options is a third collaborator:
any ``str -> str`` callable.  Its exceptions are not caught.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

# Pure function applied to every computed template URI
UrlTransform = Callable[[str], str]


class Matcher(ABC):
    """Decides whether a collection key belongs to the template set."""

    @property
    @abstractmethod
    def pattern(self) -> str:
        """The glob pattern this matcher was built from."""

    @abstractmethod
    def match(self, path: str) -> bool:
        """Return True if the forward-slash ``path`` matches the pattern."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} pattern={self.pattern!r}>"


class Renderer(ABC):
    """Renders a template string against a substitution context.

    Implementations must offer an HTML-escaping interpolation and a raw
    one, selectable per placeholder, plus truthy-conditional sections.
    Malformed templates raise; the error is not translated.
    """

    @abstractmethod
    def render(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` with ``context``."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
