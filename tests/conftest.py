"""
Shared test fixtures and configuration.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from ngtemplatecache.core.models import VirtualFile

FileFactory = Callable[[dict[str, str]], dict[str, VirtualFile]]


def _make_files(contents: dict[str, str]) -> dict[str, VirtualFile]:
    return {path: VirtualFile(contents=text.encode("utf-8")) for path, text in contents.items()}


@pytest.fixture
def make_files() -> FileFactory:
    """Build a file collection from ``path → utf-8 text``."""
    return _make_files


@pytest.fixture
def standard_files() -> dict[str, VirtualFile]:
    """Two templates, one non-template, one hidden template."""
    return _make_files(
        {
            "ignore.txt": "This is ignore",
            "one.html": "This is one",
            "path/two.html": "This is two",
            "path/.hidden.html": "This is hidden",
        }
    )


@pytest.fixture
def standard_output() -> str:
    """Loader generated from ``standard_files`` with default options."""
    return (
        "angular.module('templates').run(['$templateCache',function($templateCache){\n"
        "$templateCache.put('one.html','This is one');\n"
        "$templateCache.put('path/two.html','This is two');\n"
        "}]);\n"
    )


@pytest.fixture
def options_file(tmp_path: Path) -> Path:
    """Return a path for an options file in a temp directory."""
    return tmp_path / "templatecache.yml"
