"""Playlist loading helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from m3u.errors import FormatError
from m3u.models import Playlist
from m3u.parser import parse_lines
from sources.dispatcher import open_source

logger = logging.getLogger(__name__)


def load_playlist(identifier: str | Path) -> Playlist:
    """Load and parse the playlist at a local path or http(s) URL.

    The source is closed before returning, whether parsing succeeded or not.

    Raises:
        SourceError: the source could not be opened or read.
        FormatError: the content is not a valid M3U extended playlist.
    """
    with open_source(identifier) as source:
        try:
            playlist = parse_lines(source.lines())
        except FormatError as exc:
            logger.warning(f"[M3U] load source={identifier} status=invalid error={exc}")
            raise
    logger.info(f"[M3U] load source={identifier} tracks={len(playlist.tracks)}")
    return playlist
