"""
Module wrapper — packages the loader for a front-end module system.

Each ``ModuleSystem`` member carries its own wrapper template, so adding
a system means adding a member together with its wrapper.
"""

from __future__ import annotations

from enum import Enum

from ngtemplatecache.adapters.base import Renderer
from ngtemplatecache.core.config.loader import ConfigError


class InvalidModuleSystemError(ConfigError):
    """Raised for a module system identifier that is not recognised."""

    def __init__(self, module_system: str):
        super().__init__(f"Invalid module system: {module_system}")
        self.module_system = module_system


class ModuleSystem(Enum):
    """Known module systems: (identifier, wrapper template)."""

    BROWSERIFY = ("browserify", "'use strict';module.exports={{{js}}}")
    ES6 = ("es6", "import angular from 'angular'; export default {{{js}}}")
    IIFE = ("iife", "(function(){ {{{js}}} }());")
    REQUIREJS = (
        "requirejs",
        "define(['angular'],function(angular){'use strict';return {{{js}}} });",
    )

    def __init__(self, identifier: str, wrapper: str):
        self.identifier = identifier
        self.wrapper = wrapper

    @classmethod
    def parse(cls, identifier: str) -> ModuleSystem:
        """Look up a module system, ignoring case.

        Raises:
            InvalidModuleSystemError: Unknown identifier.
        """
        wanted = identifier.lower()
        for system in cls:
            if system.identifier == wanted:
                return system
        raise InvalidModuleSystemError(identifier)


def wrap_in_module_system(module_system: str | None, js: str, renderer: Renderer) -> str:
    """Wrap ``js`` for ``module_system``; a falsy system returns ``js`` as is."""
    if not module_system:
        return js

    system = ModuleSystem.parse(module_system)
    return renderer.render(system.wrapper, {"js": js})
