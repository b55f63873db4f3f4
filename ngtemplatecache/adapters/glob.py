"""
Glob matcher — minimatch-compatible path matching backed by wcmatch.

Option names follow minimatch (``dot``, ``nocase``, ``matchBase``, ...)
because build configurations are usually shared with JavaScript tooling.
Globstar, brace expansion, extglob and ``!`` negation are on unless the
matching ``no*`` option turns them off.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from wcmatch import glob

from ngtemplatecache.adapters.base import Matcher

logger = logging.getLogger(__name__)

_DEFAULT_FLAGS = (
    glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB | glob.NEGATE | glob.NEGATEALL | glob.FORCEUNIX
)

# option name → (flag, set when option is truthy?)
_OPTION_FLAGS: dict[str, tuple[int, bool]] = {
    "dot": (glob.DOTGLOB, True),
    "nocase": (glob.IGNORECASE, True),
    "matchBase": (glob.MATCHBASE, True),
    "noglobstar": (glob.GLOBSTAR, False),
    "nobrace": (glob.BRACE, False),
    "noext": (glob.EXTGLOB, False),
    "nonegate": (glob.NEGATE | glob.NEGATEALL, False),
}


def flags_for(options: Mapping[str, Any] | None) -> int:
    """Translate minimatch-style options into wcmatch glob flags."""
    flags = _DEFAULT_FLAGS
    for name, value in (options or {}).items():
        entry = _OPTION_FLAGS.get(name)
        if entry is None:
            logger.debug("Ignoring unsupported match option: %s", name)
            continue
        flag, set_when_true = entry
        if bool(value) == set_when_true:
            flags |= flag
        else:
            flags &= ~flag
    return flags


class GlobMatcher(Matcher):
    """Matches forward-slash keys against one glob pattern."""

    def __init__(self, pattern: str, options: Mapping[str, Any] | None = None):
        self._pattern = pattern
        self._flags = flags_for(options)

    @property
    def pattern(self) -> str:
        return self._pattern

    def match(self, path: str) -> bool:
        return glob.globmatch(path, self._pattern, flags=self._flags)
