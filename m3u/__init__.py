"""M3U extended playlist parsing and serialization."""

from m3u.errors import FormatError, M3UError, SinkError, SourceError
from m3u.models import Playlist, Tag, Track
from m3u.parser import parse_lines, parse_text
from m3u.serializer import marshal, serialize, serialize_into

__all__ = [
    "FormatError",
    "M3UError",
    "Playlist",
    "SinkError",
    "SourceError",
    "Tag",
    "Track",
    "marshal",
    "parse_lines",
    "parse_text",
    "serialize",
    "serialize_into",
]
