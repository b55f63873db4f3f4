"""
Template cache pipeline — one build pass over the host's file collection.

The plugin is built once with its options, then invoked once per build:

    select → normalize (per file) → assemble → wrap → emit

Any failure aborts the pass before the collection is touched.  Hosts
that use the ``(files, host, done)`` stage convention get exactly one
``done`` call: ``done(None)`` on success, ``done(exc)`` on failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ngtemplatecache.adapters.base import Matcher, Renderer
from ngtemplatecache.adapters.glob import GlobMatcher
from ngtemplatecache.adapters.mustache import MustacheRenderer
from ngtemplatecache.core.config.loader import resolve_options
from ngtemplatecache.core.models.files import FileCollection
from ngtemplatecache.core.models.options import Options
from ngtemplatecache.core.models.template import GeneratedFile
from ngtemplatecache.core.services.templatecache.assembler import assemble
from ngtemplatecache.core.services.templatecache.emitter import emit
from ngtemplatecache.core.services.templatecache.module_wrapper import wrap_in_module_system
from ngtemplatecache.core.services.templatecache.normalizer import normalize
from ngtemplatecache.core.services.templatecache.selector import select_templates

logger = logging.getLogger(__name__)

DoneCallback = Callable[[BaseException | None], Any]


@dataclass
class BuildReport:
    """Result of one pass."""

    destination: str = ""
    templates: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    size: int = 0
    reason: str = ""

    @property
    def template_count(self) -> int:
        return len(self.templates)

    def to_dict(self) -> dict:
        return {
            "destination": self.destination,
            "templates": list(self.templates),
            "template_count": self.template_count,
            "removed": list(self.removed),
            "size": self.size,
            "reason": self.reason,
        }


class TemplateCachePlugin:
    """Bundles matching templates into one ``$templateCache`` loader."""

    def __init__(
        self,
        options: Mapping[str, Any] | Options | None = None,
        *,
        matcher: Matcher | None = None,
        renderer: Renderer | None = None,
    ):
        self._options = resolve_options(options)
        self._matcher = matcher or GlobMatcher(self._options.match, self._options.match_options)
        self._renderer = renderer or MustacheRenderer()

    @property
    def options(self) -> Options:
        return self._options

    def run(self, files: FileCollection) -> BuildReport:
        """Run one pass over ``files``.

        Raises:
            InvalidModuleSystemError: Unknown ``module_system``.
            Exception: Anything raised by ``transform_url``, the template
                engine or the buffer codec, unchanged.
        """
        options = self._options

        sources = select_templates(files, self._matcher)
        entries = [normalize(source, options) for source in sources]

        js = assemble(entries, options, self._renderer)
        js = wrap_in_module_system(options.module_system, js, self._renderer)

        output = GeneratedFile(
            path=options.destination,
            content=js,
            reason=f"Template cache for {len(entries)} templates matching {options.match}",
        )
        removed = emit(files, output, options, [entry.filename for entry in entries])

        report = BuildReport(
            destination=output.path,
            templates=[entry.filename for entry in entries],
            removed=removed,
            size=len(files[output.path].contents),
            reason=output.reason,
        )
        logger.info("Generated %s from %d templates", report.destination, report.template_count)
        return report

    def __call__(
        self,
        files: FileCollection,
        host: Any = None,
        done: DoneCallback | None = None,
    ) -> BuildReport | None:
        """Pipeline-stage entry point.

        ``host`` is accepted for the stage signature and not used.
        Without ``done`` the report is returned and errors raise.
        """
        if done is None:
            return self.run(files)

        try:
            self.run(files)
        except Exception as e:
            logger.debug("Template cache pass failed: %s", e)
            done(e)
            return None
        done(None)
        return None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} match={self._options.match!r} destination={self._options.destination!r}>"


def templatecache(options: Mapping[str, Any] | Options | None = None) -> TemplateCachePlugin:
    """Build a template cache plugin from (partial) options."""
    return TemplateCachePlugin(options)
