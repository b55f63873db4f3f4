"""
File selector — snapshot every host file whose key matches the glob.

Selection is read-only.  Matched files are only removed by the emitter
once the whole pass has succeeded, so a failing pass never leaves the
collection half-consumed.
"""

from __future__ import annotations

import logging

from ngtemplatecache.adapters.base import Matcher
from ngtemplatecache.core.models.files import FileCollection
from ngtemplatecache.core.models.template import TemplateSource

logger = logging.getLogger(__name__)


def select_templates(files: FileCollection, matcher: Matcher) -> list[TemplateSource]:
    """Collect the templates to bundle, ordered by filename.

    Entries set to None are skipped even when their key matches.
    """
    selected: list[TemplateSource] = []

    for path in list(files.keys()):
        if not matcher.match(path):
            continue
        entry = files[path]
        if entry is None:
            continue
        logger.debug("Found template: %s", path)
        selected.append(TemplateSource(filename=path, contents=entry.contents))

    # Host enumeration order is not guaranteed; output must be reproducible
    selected.sort(key=lambda source: source.filename)
    return selected
