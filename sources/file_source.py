from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, TextIO

from config import settings
from m3u.errors import SourceError
from sources.base import LineSource

logger = logging.getLogger(__name__)


class FileLineSource(LineSource):
    """Reads a playlist from the local filesystem."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(str(path))
        try:
            self._handle: TextIO | None = open(path, "r", encoding=settings.M3U_SOURCE_ENCODING, newline=None)
        except OSError as exc:
            logger.warning(f"[M3U] source={self.identifier} kind=file status=error error={exc}")
            raise SourceError(self.identifier) from exc
        logger.info(f"[M3U] source={self.identifier} kind=file status=open")

    def lines(self) -> Iterator[str]:
        if self._handle is None:
            raise SourceError(self.identifier)
        try:
            for raw_line in self._handle:
                yield raw_line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"[M3U] source={self.identifier} kind=file status=read_error error={exc}")
            raise SourceError(self.identifier) from exc

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
