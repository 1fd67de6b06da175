"""Helpers for combining several playlists into one file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, TextIO

from m3u.errors import SinkError
from m3u.grammar import HEADER
from m3u.models import Playlist
from m3u.serializer import serialize
from playlist.export import atomic_text_writer

logger = logging.getLogger(__name__)


def merge_playlists(playlists: Iterable[Playlist], writer: TextIO) -> int:
    """Write every playlist into ``writer`` under one shared ``#EXTM3U`` header.

    The writer is flushed once, after the last fragment. Returns the number
    of tracks written.
    """
    written = 0
    fragments = 0
    try:
        writer.write(f"{HEADER}\n")
        for fragment in playlists:
            writer.write(serialize(fragment, include_header=False))
            written += len(fragment.tracks)
            fragments += 1
        flush = getattr(writer, "flush", None)
        if callable(flush):
            flush()
    except (OSError, ValueError) as exc:
        raise SinkError(f"unable to write playlist: {exc}") from exc
    logger.info(f"[M3U] merge fragments={fragments} tracks={written}")
    return written


def write_merged_m3u(target_path: Path, playlists: Iterable[Playlist]) -> Path:
    """Atomically write the merged playlists to ``target_path``."""
    target_path = Path(target_path)
    with atomic_text_writer(target_path) as handle:
        merge_playlists(playlists, handle)
    return target_path
