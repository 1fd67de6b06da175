"""Directive markers and line splitting shared by the parser and serializer."""

from __future__ import annotations

import io
from typing import Iterator

HEADER = "#EXTM3U"
EXTINF = "#EXTINF"
EXTGRP = "#EXTGRP"


def iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text`` split on ``\\n``, ``\\r`` and ``\\r\\n`` only.

    Unlike :meth:`str.splitlines`, form feeds, U+2028 and other separators
    stay inside the line, matching how files opened in text mode are read.
    """
    for raw_line in io.StringIO(text, newline=None):
        yield raw_line.rstrip("\r\n")
