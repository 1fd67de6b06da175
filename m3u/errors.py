"""Error types raised while loading or saving playlists."""

from __future__ import annotations


class M3UError(Exception):
    """Base class for every playlist load/save failure."""


class SourceError(M3UError):
    """Raised when a playlist source cannot be opened or read."""

    def __init__(self, identifier: str | None = None, message: str = "unable to open playlist source") -> None:
        super().__init__(message)
        self.identifier = identifier

    def __reduce__(self):
        return (type(self), (self.identifier, str(self)))


class SinkError(M3UError):
    """Raised when playlist text cannot be written or flushed."""


class FormatError(M3UError):
    """Raised when playlist content violates the M3U grammar."""

    MISSING_HEADER = "missing playlist header"
    MALFORMED_METADATA = "malformed metadata: missing length or name"
    INVALID_LENGTH = "invalid length"
    GROUP_WITHOUT_TRACK = "group line with no preceding track"
    URI_WITHOUT_TRACK = "URI before any track"

    def __init__(
        self,
        reason: str,
        *,
        line_number: int,
        line: str | None = None,
        expected: str | None = None,
        found: str | None = None,
    ) -> None:
        self.reason = reason
        self.line_number = line_number
        self.line = line
        self.expected = expected
        self.found = found
        super().__init__(self._render())

    def __reduce__(self):
        return (
            _rebuild_format_error,
            (self.reason, self.line_number, self.line, self.expected, self.found),
        )

    def _render(self) -> str:
        message = f"line {self.line_number}: {self.reason}"
        if self.expected is not None:
            message += f" (expected {self.expected}, found {self.found!r})"
        return message


def _rebuild_format_error(reason, line_number, line, expected, found) -> FormatError:
    return FormatError(reason, line_number=line_number, line=line, expected=expected, found=found)
