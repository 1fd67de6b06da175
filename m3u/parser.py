"""M3U extended playlist parser."""

from __future__ import annotations

from typing import Iterable

from m3u.errors import FormatError
from m3u.grammar import EXTGRP, EXTINF, HEADER, iter_lines
from m3u.models import Playlist, Track
from m3u.tags import parse_length, scan_tags, split_info_and_name


def _strip_directive(line: str, directive: str) -> str:
    payload = line[len(directive) :]
    if payload.startswith(":"):
        payload = payload[1:]
    return payload


class _PlaylistBuilder:
    """Accumulates tracks while keeping a cursor on the track being built."""

    def __init__(self) -> None:
        self.playlist = Playlist()
        self.current: Track | None = None

    def start_track(self, track: Track) -> None:
        self.playlist.tracks.append(track)
        self.current = track

    def require_current(self, reason: str, line_number: int, line: str) -> Track:
        if self.current is None:
            raise FormatError(
                reason,
                line_number=line_number,
                line=line,
                expected=f"{EXTINF} line",
                found=line,
            )
        return self.current


def _parse_extinf(line: str, line_number: int) -> Track:
    split = split_info_and_name(_strip_directive(line, EXTINF))
    if split is None:
        raise FormatError(
            FormatError.MALFORMED_METADATA,
            line_number=line_number,
            line=line,
            expected="<length>[ tags],<name>",
            found=line,
        )
    info, name = split
    length = parse_length(info)
    if length is None:
        token = info.split()[0] if info.split() else ""
        raise FormatError(
            FormatError.INVALID_LENGTH,
            line_number=line_number,
            line=line,
            expected="integer length",
            found=token,
        )
    return Track(name=name.strip(" "), length=length, tags=scan_tags(info))


def parse_lines(lines: Iterable[str]) -> Playlist:
    """Parse already-split playlist lines into a :class:`Playlist`.

    The first line must carry the ``#EXTM3U`` header. ``#EXTINF`` lines open
    a new track; ``#EXTGRP`` and location lines complete the most recently
    opened one. Other ``#`` lines and blank lines are skipped.

    Raises:
        FormatError: on the first grammar violation. No partial playlist is
            returned.
    """
    builder = _PlaylistBuilder()
    line_number = 0
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1:
            if not line.startswith(HEADER):
                raise FormatError(
                    FormatError.MISSING_HEADER,
                    line_number=1,
                    line=line,
                    expected=HEADER,
                    found=line,
                )
            continue

        if line.startswith(EXTINF):
            builder.start_track(_parse_extinf(line, line_number))
        elif line.startswith(EXTGRP):
            track = builder.require_current(FormatError.GROUP_WITHOUT_TRACK, line_number, line)
            track.group = _strip_directive(line, EXTGRP)
        elif line.startswith("#") or line == "":
            continue
        else:
            track = builder.require_current(FormatError.URI_WITHOUT_TRACK, line_number, line)
            track.uri = line.strip(" ")

    if line_number == 0:
        raise FormatError(
            FormatError.MISSING_HEADER,
            line_number=0,
            expected=HEADER,
            found="end of input",
        )
    return builder.playlist


def parse_text(text: str) -> Playlist:
    """Parse a whole playlist document held in memory."""
    if text.startswith("\ufeff"):
        text = text[1:]
    return parse_lines(iter_lines(text))
