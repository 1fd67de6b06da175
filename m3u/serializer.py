"""M3U extended playlist serializer."""

from __future__ import annotations

import io
from typing import TextIO

from m3u.errors import SinkError
from m3u.models import Playlist, Track
from m3u.grammar import EXTGRP, EXTINF, HEADER


def _render_track(track: Track) -> str:
    tags = " ".join(f'{tag.name}="{tag.value}"' for tag in track.tags)
    text = f"{EXTINF}:{track.length} {tags}, {track.name}\n"
    if track.group:
        text += f"{EXTGRP}:{track.group}\n"
    return text + f"{track.uri}\n"


def serialize_into(playlist: Playlist, writer: TextIO, include_header: bool = True) -> None:
    """Write ``playlist`` into ``writer`` and flush it.

    ``include_header=False`` omits the ``#EXTM3U`` line so several
    fragments can share a single header in one file.

    Raises:
        SinkError: when the writer fails to accept the text or to flush.
    """
    try:
        if include_header:
            writer.write(f"{HEADER}\n")
        for track in playlist.tracks:
            writer.write(_render_track(track))
        flush = getattr(writer, "flush", None)
        if callable(flush):
            flush()
    except (OSError, ValueError) as exc:
        raise SinkError(f"unable to write playlist: {exc}") from exc


def serialize(playlist: Playlist, include_header: bool = True) -> str:
    buf = io.StringIO()
    serialize_into(playlist, buf, include_header=include_header)
    return buf.getvalue()


def marshal(playlist: Playlist) -> io.StringIO:
    """Return the complete playlist file as a readable in-memory stream."""
    buf = io.StringIO()
    serialize_into(playlist, buf, include_header=True)
    buf.seek(0)
    return buf
