"""
Adapters — the glob and template engines the pipeline runs on.
"""

from ngtemplatecache.adapters.base import Matcher, Renderer, UrlTransform
from ngtemplatecache.adapters.glob import GlobMatcher
from ngtemplatecache.adapters.mustache import MustacheRenderer

__all__ = [
    "GlobMatcher",
    "Matcher",
    "MustacheRenderer",
    "Renderer",
    "UrlTransform",
]
