"""
Options loader — resolves plugin options and reads them from YAML.

``resolve_options`` is the single entry point that turns whatever the
host passed (nothing, a mapping, or an already-built ``Options``) into a
fully populated, frozen ``Options``.  ``load_options`` does the same for
an options file.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ngtemplatecache.core.models.options import Options

logger = logging.getLogger(__name__)

# Key an options file may nest its settings under
OPTIONS_SECTION = "templatecache"


class ConfigError(Exception):
    """Raised when plugin configuration is invalid or missing."""


def resolve_options(options: Mapping[str, Any] | Options | None = None) -> Options:
    """Fill every unset option with its default.

    Only absent keys and keys set to None are defaulted.  Explicit falsy
    values (``""``, ``False``, ``0``) are kept as given, then
    ``removeSource`` and ``standalone`` are reduced to strict booleans.
    Values of other types are coerced rather than rejected, so this
    always succeeds.

    Args:
        options: Partial options keyed by camelCase alias or field name.

    Returns:
        Resolved Options.
    """
    if isinstance(options, Options):
        return options

    supplied = {key: value for key, value in (options or {}).items() if value is not None}
    resolved = Options.model_validate(supplied)

    logger.debug(
        "Resolved options: match=%s destination=%s moduleSystem=%s",
        resolved.match, resolved.destination, resolved.module_system,
    )
    return resolved


def load_options(path: Path, overrides: Mapping[str, Any] | None = None) -> Options:
    """Load options from a YAML file.

    The file may hold the options at top level or under a
    ``templatecache:`` key.  ``overrides`` wins over the file and is the
    only way to supply ``transformUrl``.

    Raises:
        ConfigError: If the file is missing, unreadable or not a mapping.
    """
    if not path.is_file():
        raise ConfigError(f"Options file not found: {path}")

    logger.debug("Loading template cache options from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    section = data.get(OPTIONS_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigError(f"'{OPTIONS_SECTION}' in {path} must be a mapping")

    merged = {**section, **(overrides or {})}
    return resolve_options(merged)
