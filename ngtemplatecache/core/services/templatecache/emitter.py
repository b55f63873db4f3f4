"""
Emitter — writes the generated loader into the host collection.

Consumed sources are removed first (when ``remove_source`` is set), then
the loader is stored at the destination key, replacing whatever was
there.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ngtemplatecache.core.models.files import FileCollection, VirtualFile
from ngtemplatecache.core.models.options import Options
from ngtemplatecache.core.models.template import GeneratedFile
from ngtemplatecache.core.services.templatecache.encoding import encode_text

logger = logging.getLogger(__name__)


def emit(
    files: FileCollection,
    output: GeneratedFile,
    options: Options,
    consumed: Sequence[str],
) -> list[str]:
    """Write ``output`` and drop consumed sources.

    Args:
        files: The host collection, mutated in place.
        output: Loader produced by the pass.
        options: Resolved options (encoding, mode, remove_source).
        consumed: Keys of the templates bundled into ``output``.

    Returns:
        Keys actually removed from ``files``.
    """
    # Encode before touching the collection so an encoding error leaves it intact
    contents = encode_text(output.content, options.buffer_encoding)

    removed: list[str] = []
    if options.remove_source:
        for path in consumed:
            if path in files:
                del files[path]
                removed.append(path)
                logger.debug("Removed source: %s", path)

    logger.debug("Writing to %s", output.path)
    files[output.path] = VirtualFile(contents=contents, mode=options.destination_mode)
    return removed
