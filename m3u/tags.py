"""EXTINF info segment scanning."""

from __future__ import annotations

import re

from m3u.models import Tag

_TAG_RE = re.compile(r'([A-Za-z0-9-]+)="([^"]*)"')
_LENGTH_RE = re.compile(r"[+-]?[0-9]+")


def split_info_and_name(payload: str) -> tuple[str, str] | None:
    """Split ``<info>,<name>`` on the first comma outside a quoted tag value.

    Falls back to the first comma when every comma sits inside quotes, and
    returns ``None`` only when there is no comma at all. Everything after the
    separator, further commas included, belongs to the name.
    """
    first = payload.find(",")
    if first < 0:
        return None
    quoted = [match.span(2) for match in _TAG_RE.finditer(payload)]
    idx = first
    while idx >= 0:
        if not any(lo <= idx < hi for lo, hi in quoted):
            return payload[:idx], payload[idx + 1 :]
        idx = payload.find(",", idx + 1)
    return payload[:first], payload[first + 1 :]


def parse_length(info: str) -> int | None:
    tokens = info.split()
    if not tokens or not _LENGTH_RE.fullmatch(tokens[0]):
        return None
    return int(tokens[0])


def scan_tags(info: str) -> list[Tag]:
    """Return the ``key="value"`` pairs of an info segment in line order."""
    return [Tag(name=name, value=value) for name, value in _TAG_RE.findall(info)]
