"""Playlist export helpers."""

from __future__ import annotations

import logging
import os
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from config import settings
from m3u.errors import SinkError
from m3u.models import Playlist
from m3u.serializer import serialize_into

logger = logging.getLogger(__name__)

_INVALID_FS_CHARS_RE = re.compile(r'[<>:"/\\|?*]')
_MULTISPACE_RE = re.compile(r"\s+")


def write_m3u(playlist_root: Path, playlist_name: str, playlist: Playlist) -> Path:
    """Create or overwrite an M3U playlist file.

    Rules:
    - Playlist files live under ``playlist_root``.
    - Filename format is ``{playlist_name}.m3u`` with unsafe characters removed.
    - The file always starts with the ``#EXTM3U`` header.
    - Writes are atomic (temp file then replace).
    """
    safe_name = sanitize_playlist_name(playlist_name) or "playlist"
    target_path = Path(playlist_root) / f"{safe_name}.m3u"
    with atomic_text_writer(target_path) as handle:
        serialize_into(playlist, handle, include_header=True)
    logger.info(f"[M3U] write target={target_path} tracks={len(playlist.tracks)}")
    return target_path


@contextmanager
def atomic_text_writer(target_path: Path) -> Iterator[TextIO]:
    """Yield a text handle whose content replaces ``target_path`` on success.

    Any failure removes the temp file and surfaces as :class:`SinkError`.
    """
    target_path = Path(target_path)
    temp_path = target_path.with_name(f".{target_path.name}.tmp")
    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_path, "w", encoding=settings.M3U_OUTPUT_ENCODING, newline="\n") as handle:
            yield handle
        os.replace(temp_path, target_path)
    except OSError as exc:
        logger.warning(f"[M3U] write target={target_path} status=error error={exc}")
        raise SinkError(f"unable to write playlist: {exc}") from exc
    finally:
        if temp_path.exists():
            temp_path.unlink()


def sanitize_playlist_name(name: str) -> str:
    """Return a filesystem-safe playlist name."""
    text = _INVALID_FS_CHARS_RE.sub("", str(name))
    text = _MULTISPACE_RE.sub(" ", text).strip()
    return text.rstrip(" .")
