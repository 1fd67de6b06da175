from __future__ import annotations

from pathlib import Path

from sources.base import LineSource
from sources.file_source import FileLineSource
from sources.http_source import HttpLineSource

_HTTP_PREFIXES = ("http://", "https://")


def is_remote(identifier: str) -> bool:
    return str(identifier).startswith(_HTTP_PREFIXES)


def open_source(identifier: str | Path) -> LineSource:
    """Open a playlist identified by a local path or an http(s) URL."""
    if isinstance(identifier, str) and is_remote(identifier):
        return HttpLineSource(identifier)
    return FileLineSource(identifier)
