"""
ngtemplatecache — bundle HTML templates into an AngularJS $templateCache loader.

    from ngtemplatecache import templatecache

    plugin = templatecache({"moduleSystem": "es6", "root": "views/"})
    plugin(files)
"""

from ngtemplatecache.core.engine.pipeline import (
    BuildReport,
    TemplateCachePlugin,
    templatecache,
)
from ngtemplatecache.core.models import Options, VirtualFile

__version__ = "0.1.0"

__all__ = [
    "BuildReport",
    "Options",
    "TemplateCachePlugin",
    "VirtualFile",
    "__version__",
    "templatecache",
]
