from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator


class LineSource(ABC):
    """A fallible stream of playlist text lines that must be closed after use."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier

    @abstractmethod
    def lines(self) -> Iterator[str]:
        """Yield the source's lines without their line terminators."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(self, *_exc_info) -> None:
        self.close()
