"""Playlist data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Tag:
    """A ``name="value"`` attribute attached to a track."""

    name: str
    value: str


@dataclass
class Track:
    name: str
    length: int
    uri: str = ""
    tags: list[Tag] = field(default_factory=list)
    group: str = ""


@dataclass
class Playlist:
    """Ordered list of tracks; order is playback order and duplicates are allowed."""

    tracks: list[Track] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tracks)

    def __iter__(self):
        return iter(self.tracks)
